"""
Use case: Check a username/password pair.

Input: CredentialsCommand (username, password)
Output: UserProfile
Side effects: None (the caller stores the session).
Failure cases: InvalidCredentialsError ("Incorrect username." / "Incorrect password.").
"""

import logging

from app.application.identity.dtos import CredentialsCommand, UserProfile
from app.domain.identity.errors import InvalidCredentialsError
from app.domain.identity.ports import PasswordHasher, UserRepository

logger = logging.getLogger(__name__)


class AuthenticateUserUseCase:
    """Verifies credentials against the stored bcrypt hash."""

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    def execute(self, command: CredentialsCommand) -> UserProfile:
        user = self._user_repo.get_by_username(command.username)
        if user is None:
            logger.info("Login failed: unknown username=%s", command.username)
            raise InvalidCredentialsError("Incorrect username.")

        if not self._hasher.verify(command.password, user.password_hash):
            logger.info("Login failed: wrong password for user id=%d", user.id)
            raise InvalidCredentialsError("Incorrect password.")

        logger.info("User id=%d logged in", user.id)
        return UserProfile.from_user(user)
