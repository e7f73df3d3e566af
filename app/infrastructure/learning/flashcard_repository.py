"""
Adapter: Flashcards and review schedules.

Implements the FlashcardRepository port. Scheduling arithmetic lives in
app.domain.learning.spaced_repetition; this adapter only loads and
stores the rows.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload, sessionmaker

from app.domain.learning.entities import Flashcard, FlashcardProgress
from app.domain.learning.errors import (
    FlashcardNotFoundError,
    FlashcardProgressNotFoundError,
    ProgressAlreadyInitializedError,
)
from app.domain.learning.ports import FlashcardRepository
from app.domain.learning.spaced_repetition import apply_review, new_progress
from app.infrastructure.persistence.models import FlashcardModel, FlashcardProgressModel

logger = logging.getLogger(__name__)


def _flashcard(row: FlashcardModel) -> Flashcard:
    return Flashcard(
        id=row.id,
        term=row.term,
        definition=row.definition,
        lesson_id=row.lesson_id,
        created_at=row.created_at,
    )


def _schedule(row: FlashcardProgressModel, with_card: bool = False) -> FlashcardProgress:
    return FlashcardProgress(
        flashcard_id=row.flashcard_id,
        ease_factor=row.ease_factor,
        interval=row.interval,
        consecutive_correct=row.consecutive_correct,
        next_review_at=row.next_review_at,
        last_reviewed_at=row.last_reviewed_at,
        flashcard=_flashcard(row.flashcard) if with_card else None,
    )


class FlashcardRepositoryAdapter(FlashcardRepository):
    """SQLAlchemy adapter for flashcards."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def list_flashcards(self, lesson_id: Optional[int] = None) -> list[Flashcard]:
        with self._session_factory() as session:
            query = select(FlashcardModel).order_by(FlashcardModel.id)
            if lesson_id is not None:
                query = query.where(FlashcardModel.lesson_id == lesson_id)
            return [_flashcard(row) for row in session.scalars(query)]

    def initialize(self, user_id: int, flashcard_id: int, now: datetime) -> FlashcardProgress:
        try:
            with self._session_factory.begin() as session:
                if session.get(FlashcardModel, flashcard_id) is None:
                    raise FlashcardNotFoundError(flashcard_id)
                if self._find(session, user_id, flashcard_id) is not None:
                    raise ProgressAlreadyInitializedError(flashcard_id)

                schedule = new_progress(flashcard_id, now)
                row = FlashcardProgressModel(
                    user_id=user_id,
                    flashcard_id=flashcard_id,
                    ease_factor=schedule.ease_factor,
                    interval=schedule.interval,
                    consecutive_correct=schedule.consecutive_correct,
                    last_reviewed_at=schedule.last_reviewed_at,
                    next_review_at=schedule.next_review_at,
                    created_at=now,
                )
                session.add(row)
                session.flush()
                return _schedule(row, with_card=True)
        except IntegrityError:
            # lost a race against a concurrent initialise
            raise ProgressAlreadyInitializedError(flashcard_id) from None

    def due(self, user_id: int, now: datetime) -> list[FlashcardProgress]:
        with self._session_factory() as session:
            rows = session.scalars(
                select(FlashcardProgressModel)
                .options(selectinload(FlashcardProgressModel.flashcard))
                .where(
                    FlashcardProgressModel.user_id == user_id,
                    FlashcardProgressModel.next_review_at <= now,
                )
                .order_by(FlashcardProgressModel.next_review_at, FlashcardProgressModel.id)
            )
            return [_schedule(row, with_card=True) for row in rows]

    def review(
        self, user_id: int, flashcard_id: int, correct: bool, now: datetime
    ) -> FlashcardProgress:
        with self._session_factory.begin() as session:
            row = self._find(session, user_id, flashcard_id, for_update=True)
            if row is None:
                raise FlashcardProgressNotFoundError(flashcard_id)

            updated = apply_review(_schedule(row), correct, now)
            row.ease_factor = updated.ease_factor
            row.interval = updated.interval
            row.consecutive_correct = updated.consecutive_correct
            row.last_reviewed_at = updated.last_reviewed_at
            row.next_review_at = updated.next_review_at
            session.flush()
            return _schedule(row, with_card=True)

    @staticmethod
    def _find(
        session: Session, user_id: int, flashcard_id: int, for_update: bool = False
    ) -> Optional[FlashcardProgressModel]:
        query = select(FlashcardProgressModel).where(
            FlashcardProgressModel.user_id == user_id,
            FlashcardProgressModel.flashcard_id == flashcard_id,
        )
        if for_update:
            query = query.with_for_update()
        return session.scalar(query)
