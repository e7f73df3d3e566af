"""
Dependency injection for the social bounded context.
"""

from fastapi import Depends
from sqlalchemy.orm import Session, sessionmaker

from app.domain.social.ports import PostRepository
from app.infrastructure.social.post_repository import PostRepositoryAdapter
from app.interfaces.dependencies import get_session_factory


def get_post_repository(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> PostRepository:
    return PostRepositoryAdapter(session_factory)
