"""
Port interfaces (ABCs) for the learning bounded context.

Infrastructure adapters implement these interfaces.
Multi-step writes (complete a lesson, submit an answer, review a card)
are single port methods so adapters can run them in one transaction.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from app.domain.learning.entities import (
    AchievementStatus,
    Flashcard,
    FlashcardProgress,
    Lesson,
    LessonCompletion,
    LessonOverview,
    NewLesson,
    QuizAnswerResult,
    QuizProgress,
    QuizQuestion,
    QuizSection,
)


class LessonRepository(ABC):
    """Port for lessons, lesson progress and achievements."""

    @abstractmethod
    def list_with_progress(self, user_id: int) -> list[LessonOverview]:
        """Return all lessons ordered by `order`, with the user's progress."""
        raise NotImplementedError

    @abstractmethod
    def get(self, lesson_id: int) -> Optional[Lesson]:
        """Return a lesson by id, or None."""
        raise NotImplementedError

    @abstractmethod
    def exists_with_title(self, title: str) -> bool:
        """Return True if a lesson with this exact title is stored."""
        raise NotImplementedError

    @abstractmethod
    def create(self, lesson: NewLesson) -> Lesson:
        """Persist a lesson and return it."""
        raise NotImplementedError

    @abstractmethod
    def complete(
        self, user_id: int, lesson_id: int, score: Optional[int], xp_per_level: int
    ) -> LessonCompletion:
        """Mark the lesson complete, award XP and unlock achievements atomically.

        Raises:
            LessonNotFoundError: If the lesson does not exist.
            LessonAlreadyCompletedError: If the user completed it before.
            UserNotFoundError: If the user does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def achievements(self, user_id: int) -> list[AchievementStatus]:
        """Return every achievement with the user's unlock time."""
        raise NotImplementedError


class QuizRepository(ABC):
    """Port for quiz content and per-section progress."""

    @abstractmethod
    def sections(self) -> list[QuizSection]:
        """Return all sections ordered by `order`."""
        raise NotImplementedError

    @abstractmethod
    def progress(self, user_id: int) -> list[QuizProgress]:
        """Return the user's progress for every section attempted."""
        raise NotImplementedError

    @abstractmethod
    def questions(self, section_id: Optional[int] = None) -> list[QuizQuestion]:
        """Return questions, optionally restricted to one section."""
        raise NotImplementedError

    @abstractmethod
    def submit(
        self, user_id: int, question_id: int, answer: str, xp_per_level: int, now: datetime
    ) -> QuizAnswerResult:
        """Record an answer, update section progress and award XP atomically.

        Raises:
            QuestionNotFoundError: If the question does not exist.
        """
        raise NotImplementedError


class FlashcardRepository(ABC):
    """Port for flashcards and review schedules."""

    @abstractmethod
    def list_flashcards(self, lesson_id: Optional[int] = None) -> list[Flashcard]:
        """Return flashcards, optionally restricted to one lesson."""
        raise NotImplementedError

    @abstractmethod
    def initialize(self, user_id: int, flashcard_id: int, now: datetime) -> FlashcardProgress:
        """Create the user's schedule for a card, due immediately.

        Raises:
            FlashcardNotFoundError: If the card does not exist.
            ProgressAlreadyInitializedError: If a schedule already exists.
        """
        raise NotImplementedError

    @abstractmethod
    def due(self, user_id: int, now: datetime) -> list[FlashcardProgress]:
        """Return schedules due at `now`, most overdue first, with their cards."""
        raise NotImplementedError

    @abstractmethod
    def review(
        self, user_id: int, flashcard_id: int, correct: bool, now: datetime
    ) -> FlashcardProgress:
        """Apply a review result and return the new schedule.

        Raises:
            FlashcardProgressNotFoundError: If the user has no schedule for the card.
        """
        raise NotImplementedError
