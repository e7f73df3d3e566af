"""
Use case: Update the caller's profile.

Input: UpdateProfileCommand (user_id, optional profile fields and brokerage keys)
Output: UserProfile
Side effects: Updates only the provided columns of the user row.
Failure cases: UserNotFoundError.
"""

import logging

from app.application.identity.dtos import UpdateProfileCommand, UserProfile
from app.domain.identity.entities import ProfileChanges
from app.domain.identity.ports import UserRepository

logger = logging.getLogger(__name__)


class UpdateProfileUseCase:
    """Applies a partial profile update."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: UpdateProfileCommand) -> UserProfile:
        """Run the profile update.

        Args:
            command: The user id and the fields to change.

        Returns:
            The updated public profile.
        """
        changes = ProfileChanges(
            display_name=command.display_name,
            bio=command.bio,
            avatar_url=command.avatar_url,
            education=command.education,
            occupation=command.occupation,
            alpaca_api_key=command.alpaca_api_key,
            alpaca_secret_key=command.alpaca_secret_key,
        )
        # field names only: the values may be brokerage secrets
        logger.info(
            "Updating profile of user id=%d fields=%s",
            command.user_id,
            sorted(changes.as_dict()),
        )
        user = self._user_repo.update_profile(command.user_id, changes)
        return UserProfile.from_user(user)
