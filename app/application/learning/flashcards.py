"""
Use cases: Flashcards and their spaced-repetition schedule.

- ListFlashcardsUseCase: cards, optionally for one lesson.
- InitializeFlashcardUseCase: start a schedule, due immediately.
  Fails with FlashcardNotFoundError or ProgressAlreadyInitializedError.
- GetDueFlashcardsUseCase: schedules due now, most overdue first.
- ReviewFlashcardUseCase: apply a review via
  `app.domain.learning.spaced_repetition`. Fails with
  FlashcardProgressNotFoundError.

All times are UTC; `clock` lets tests pin "now".
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from app.application.learning.dtos import ReviewFlashcardCommand
from app.domain.learning.entities import Flashcard, FlashcardProgress
from app.domain.learning.ports import FlashcardRepository

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ListFlashcardsUseCase:
    def __init__(self, flashcard_repo: FlashcardRepository) -> None:
        self._flashcard_repo = flashcard_repo

    def execute(self, lesson_id: Optional[int] = None) -> list[Flashcard]:
        return self._flashcard_repo.list_flashcards(lesson_id)


class InitializeFlashcardUseCase:
    def __init__(self, flashcard_repo: FlashcardRepository, clock: Clock = _utcnow) -> None:
        self._flashcard_repo = flashcard_repo
        self._clock = clock

    def execute(self, user_id: int, flashcard_id: int) -> FlashcardProgress:
        progress = self._flashcard_repo.initialize(user_id, flashcard_id, self._clock())
        logger.info("User id=%d started flashcard id=%d", user_id, flashcard_id)
        return progress


class GetDueFlashcardsUseCase:
    def __init__(self, flashcard_repo: FlashcardRepository, clock: Clock = _utcnow) -> None:
        self._flashcard_repo = flashcard_repo
        self._clock = clock

    def execute(self, user_id: int) -> list[FlashcardProgress]:
        return self._flashcard_repo.due(user_id, self._clock())


class ReviewFlashcardUseCase:
    def __init__(self, flashcard_repo: FlashcardRepository, clock: Clock = _utcnow) -> None:
        self._flashcard_repo = flashcard_repo
        self._clock = clock

    def execute(self, command: ReviewFlashcardCommand) -> FlashcardProgress:
        progress = self._flashcard_repo.review(
            command.user_id, command.flashcard_id, command.correct, self._clock()
        )
        logger.info(
            "User id=%d reviewed flashcard id=%d: correct=%s next in %d day(s), ease=%.2f",
            command.user_id,
            command.flashcard_id,
            command.correct,
            progress.interval,
            progress.ease_factor,
        )
        return progress
