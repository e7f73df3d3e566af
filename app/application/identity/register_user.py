"""
Use case: Register a new user account.

Input: CredentialsCommand (username, password)
Output: UserProfile
Side effects: Inserts a row in users with a bcrypt hash of the password.
Failure cases: UsernameTakenError.
"""

import logging

from app.application.identity.dtos import CredentialsCommand, UserProfile
from app.domain.identity.errors import UsernameTakenError
from app.domain.identity.ports import PasswordHasher, UserRepository

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Creates an account after checking the username is free.

    The repository also enforces uniqueness, so a concurrent registration
    of the same name still fails with UsernameTakenError.
    """

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    def execute(self, command: CredentialsCommand) -> UserProfile:
        """Run the registration use case.

        Args:
            command: The requested username and plain-text password.

        Returns:
            The public profile of the new user.
        """
        if self._user_repo.get_by_username(command.username) is not None:
            raise UsernameTakenError(command.username)

        user = self._user_repo.create(
            username=command.username,
            password_hash=self._hasher.hash(command.password),
        )
        logger.info("Registered user id=%d username=%s", user.id, user.username)
        return UserProfile.from_user(user)
