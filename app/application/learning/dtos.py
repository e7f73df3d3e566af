"""
Data Transfer Objects for the learning application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CompleteLessonCommand:
    """Input DTO for completing a lesson.

    Attributes:
        score: Optional self-reported score stored with the progress row.
    """

    user_id: int
    lesson_id: int
    score: Optional[int] = None


@dataclass(frozen=True)
class QuizQuestionView:
    """Output DTO: a question as shown before answering.

    The correct answer is mixed into `choices` and never singled out.
    """

    id: int
    section_id: int
    term: str
    question: str
    choices: list[str]
    difficulty: str
    xp_reward: int


@dataclass(frozen=True)
class SubmitAnswerCommand:
    """Input DTO for answering a quiz question."""

    user_id: int
    question_id: int
    answer: str


@dataclass(frozen=True)
class ReviewFlashcardCommand:
    """Input DTO for recording a flashcard review."""

    user_id: int
    flashcard_id: int
    correct: bool
