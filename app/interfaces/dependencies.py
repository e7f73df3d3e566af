"""
Dependency injection shared by every bounded context.

The session factory and the authenticated user id are the two things
every router needs. Tests override `get_session_factory` to point at
an in-memory database.
"""

from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session, sessionmaker

from app.application.identity.get_current_user import GetCurrentUserUseCase
from app.domain.identity.errors import NotAuthenticatedError
from app.infrastructure.identity.user_repository import UserRepositoryAdapter
from app.infrastructure.persistence import database

SESSION_USER_KEY = "user_id"


def get_session_factory() -> sessionmaker[Session]:
    """Return the process-wide SQLAlchemy session factory."""
    return database.get_session_factory()


def get_session_user_id(request: Request) -> Optional[int]:
    """Return the user id stored in the signed session cookie, if any."""
    value = request.session.get(SESSION_USER_KEY)
    return int(value) if value is not None else None


def get_current_user_id(
    user_id: Optional[int] = Depends(get_session_user_id),
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> int:
    """Require a session that points to an existing user.

    Raises:
        NotAuthenticatedError: No session, or the user was deleted.
    """
    if user_id is None:
        raise NotAuthenticatedError()
    GetCurrentUserUseCase(UserRepositoryAdapter(session_factory)).execute(user_id)
    return user_id
