"""
Dependency injection for the learning bounded context.
"""

from fastapi import Depends
from sqlalchemy.orm import Session, sessionmaker

from app.domain.learning.ports import FlashcardRepository, LessonRepository, QuizRepository
from app.infrastructure.learning.flashcard_repository import FlashcardRepositoryAdapter
from app.infrastructure.learning.lesson_repository import LessonRepositoryAdapter
from app.infrastructure.learning.quiz_repository import QuizRepositoryAdapter
from app.interfaces.dependencies import get_session_factory


def get_lesson_repository(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> LessonRepository:
    return LessonRepositoryAdapter(session_factory)


def get_quiz_repository(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> QuizRepository:
    return QuizRepositoryAdapter(session_factory)


def get_flashcard_repository(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> FlashcardRepository:
    return FlashcardRepositoryAdapter(session_factory)
