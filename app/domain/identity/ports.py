"""
Port interfaces (ABCs) for the identity bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.identity.entities import ProfileChanges, User


class UserRepository(ABC):
    """Port for persisting and retrieving users."""

    @abstractmethod
    def get_by_id(self, user_id: int) -> Optional[User]:
        """Return a user by id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_by_username(self, username: str) -> Optional[User]:
        """Return a user by username, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def create(self, username: str, password_hash: str) -> User:
        """Persist a new user and return it with its assigned id.

        Raises:
            UsernameTakenError: If the username already exists.
        """
        raise NotImplementedError

    @abstractmethod
    def update_profile(self, user_id: int, changes: ProfileChanges) -> User:
        """Apply a partial profile update and return the updated user.

        Raises:
            UserNotFoundError: If the user does not exist.
        """
        raise NotImplementedError


class PasswordHasher(ABC):
    """Port for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash of the password."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if the password matches the stored hash."""
        raise NotImplementedError
