"""
Domain entities for the learning bounded context.

Lessons and achievements, quiz content and per-section progress,
flashcards and their review schedule.
They contain no framework imports and no IO operations.
"""

import random
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Optional


# ---------------------------------------------------------------------------
# Lessons & achievements
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Lesson:
    """A markdown lesson with an XP reward.

    Attributes:
        prerequisites: Ids of lessons meant to be taken first (informational).
        order: Position in the curriculum, ascending.
    """

    id: int
    title: str
    description: str
    content: str
    difficulty: str
    xp_reward: int
    order: int
    prerequisites: list[int] = field(default_factory=list)
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class NewLesson:
    """A lesson about to be stored (seeded or generated)."""

    title: str
    description: str
    content: str
    difficulty: str
    xp_reward: int
    order: int
    prerequisites: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class LessonProgress:
    """A user's completion state for one lesson."""

    lesson_id: int
    completed: bool
    score: Optional[int] = None
    completed_at: Optional[datetime] = None


@dataclass(frozen=True)
class LessonOverview:
    """A lesson together with the viewing user's progress, if any."""

    lesson: Lesson
    progress: Optional[LessonProgress] = None


class RequirementType(Enum):
    """What an achievement requirement measures."""

    LESSONS_COMPLETED = "lessons_completed"
    XP_REACHED = "xp_reached"
    LEVEL_REACHED = "level_reached"


@dataclass(frozen=True)
class AchievementRequirement:
    """Threshold that unlocks an achievement."""

    type: RequirementType
    value: int


@dataclass(frozen=True)
class Achievement:
    """An unlockable badge with an XP bonus."""

    id: int
    title: str
    description: str
    requirement: AchievementRequirement
    xp_reward: int
    icon: Optional[str] = None


@dataclass(frozen=True)
class AchievementStatus:
    """An achievement with the viewing user's unlock time, if unlocked."""

    achievement: Achievement
    unlocked_at: Optional[datetime] = None

    @property
    def unlocked(self) -> bool:
        return self.unlocked_at is not None


@dataclass(frozen=True)
class LearnerStats:
    """The figures achievement requirements are checked against."""

    xp: int
    level: int
    lessons_completed: int


@dataclass(frozen=True)
class LessonCompletion:
    """Outcome of completing a lesson.

    Attributes:
        xp_earned: Lesson XP plus the XP of every achievement unlocked.
        xp: The user's total XP afterwards.
        level: The user's level afterwards.
    """

    lesson_id: int
    xp_earned: int
    xp: int
    level: int
    unlocked_achievements: list[Achievement] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Quiz
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class QuizSection:
    """A group of quiz questions."""

    id: int
    title: str
    description: str
    difficulty: str
    order: int


@dataclass(frozen=True)
class QuizQuestion:
    """A multiple-choice question about a trading term."""

    id: int
    section_id: int
    term: str
    question: str
    correct_answer: str
    wrong_answers: list[str]
    difficulty: str
    xp_reward: int

    def is_correct(self, answer: str) -> bool:
        """Exact match, ignoring surrounding whitespace."""
        return answer.strip() == self.correct_answer.strip()

    def choices(self, rng: Optional[random.Random] = None) -> list[str]:
        """Return the correct and wrong answers in random order."""
        options = [self.correct_answer, *self.wrong_answers]
        (rng or random).shuffle(options)
        return options


@dataclass(frozen=True)
class QuizProgress:
    """A user's running tally for one quiz section.

    Attributes:
        score: Sum of XP earned from correct answers in the section.
        best_score: Highest score ever reached.
    """

    section_id: int
    score: int = 0
    best_score: int = 0
    total_questions_answered: int = 0
    correct_answers: int = 0
    attempts_count: int = 0
    last_attempt_at: Optional[datetime] = None

    def record(self, correct: bool, xp_reward: int, at: datetime) -> "QuizProgress":
        """Return the progress after one more answer."""
        score = self.score + xp_reward if correct else self.score
        return replace(
            self,
            score=score,
            best_score=max(self.best_score, score),
            total_questions_answered=self.total_questions_answered + 1,
            correct_answers=self.correct_answers + (1 if correct else 0),
            attempts_count=self.attempts_count + 1,
            last_attempt_at=at,
        )


@dataclass(frozen=True)
class QuizAnswerResult:
    """Outcome of submitting an answer."""

    question_id: int
    correct: bool
    xp_earned: int
    correct_answer: str


# ---------------------------------------------------------------------------
# Flashcards
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Flashcard:
    """A term/definition card, optionally tied to a lesson."""

    id: int
    term: str
    definition: str
    lesson_id: Optional[int] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class ReviewSchedule:
    """Spaced-repetition state: interval in days and ease factor."""

    interval: int
    ease_factor: float


@dataclass(frozen=True)
class FlashcardProgress:
    """A user's review schedule for one flashcard."""

    flashcard_id: int
    ease_factor: float
    interval: int
    consecutive_correct: int
    next_review_at: datetime
    last_reviewed_at: Optional[datetime] = None
    flashcard: Optional[Flashcard] = None
