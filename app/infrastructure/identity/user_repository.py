"""
Adapter: User persistence.

Implements the UserRepository port on the `users` table.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from app.domain.identity.entities import ProfileChanges, User
from app.domain.identity.errors import UsernameTakenError, UserNotFoundError
from app.domain.identity.ports import UserRepository
from app.infrastructure.persistence.models import UserModel

logger = logging.getLogger(__name__)


def to_user(row: UserModel) -> User:
    return User(
        id=row.id,
        username=row.username,
        password_hash=row.password,
        display_name=row.display_name,
        bio=row.bio,
        avatar_url=row.avatar_url,
        education=row.education,
        occupation=row.occupation,
        alpaca_api_key=row.alpaca_api_key,
        alpaca_secret_key=row.alpaca_secret_key,
        xp=row.xp,
        level=row.level,
        created_at=row.created_at,
    )


class UserRepositoryAdapter(UserRepository):
    """SQLAlchemy adapter for the users table."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with self._session_factory() as session:
            row = session.get(UserModel, user_id)
            return to_user(row) if row else None

    def get_by_username(self, username: str) -> Optional[User]:
        with self._session_factory() as session:
            row = session.scalar(select(UserModel).where(UserModel.username == username))
            return to_user(row) if row else None

    def create(self, username: str, password_hash: str) -> User:
        """Insert a user; the unique index decides races on the username."""
        with self._session_factory.begin() as session:
            row = UserModel(username=username, password=password_hash, xp=0, level=1)
            session.add(row)
            try:
                session.flush()
            except IntegrityError:
                raise UsernameTakenError(username) from None
            return to_user(row)

    def update_profile(self, user_id: int, changes: ProfileChanges) -> User:
        with self._session_factory.begin() as session:
            row = session.get(UserModel, user_id)
            if row is None:
                raise UserNotFoundError(user_id)
            for column, value in changes.as_dict().items():
                setattr(row, column, value)
            session.flush()
            return to_user(row)
