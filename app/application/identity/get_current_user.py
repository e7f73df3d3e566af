"""
Use case: Resolve the user behind a session.

Input: user id stored in the session (or None)
Output: UserProfile
Side effects: None.
Failure cases: NotAuthenticatedError (no session, or the user no longer exists).
"""

from typing import Optional

from app.application.identity.dtos import UserProfile
from app.domain.identity.errors import NotAuthenticatedError
from app.domain.identity.ports import UserRepository


class GetCurrentUserUseCase:
    """Loads the session user; a dangling session counts as logged out."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, user_id: Optional[int]) -> UserProfile:
        if user_id is None:
            raise NotAuthenticatedError()
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise NotAuthenticatedError()
        return UserProfile.from_user(user)
