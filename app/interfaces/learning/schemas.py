"""
Pydantic schemas for learning API request/response validation.

Covers lessons, achievements, quizzes and flashcards.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.application.learning.dtos import QuizQuestionView
from app.domain.learning.entities import (
    Achievement,
    AchievementStatus,
    Flashcard,
    FlashcardProgress,
    Lesson,
    LessonCompletion,
    LessonOverview,
    LessonProgress,
    QuizAnswerResult,
    QuizProgress,
    QuizSection,
)
from app.interfaces.schemas import CamelModel


# ---------------------------------------------------------------------------
# Lessons and achievements
# ---------------------------------------------------------------------------


class LessonResponse(CamelModel):
    id: int
    title: str
    description: str
    content: str
    difficulty: str
    xp_reward: int
    order: int
    prerequisites: list[int]
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, lesson: Lesson) -> "LessonResponse":
        return cls(
            id=lesson.id,
            title=lesson.title,
            description=lesson.description,
            content=lesson.content,
            difficulty=lesson.difficulty,
            xp_reward=lesson.xp_reward,
            order=lesson.order,
            prerequisites=list(lesson.prerequisites),
            created_at=lesson.created_at,
        )


class LessonProgressResponse(CamelModel):
    completed: bool
    score: Optional[int] = None
    completed_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, progress: LessonProgress) -> "LessonProgressResponse":
        return cls(
            completed=progress.completed,
            score=progress.score,
            completed_at=progress.completed_at,
        )


class LessonOverviewResponse(LessonResponse):
    """A lesson with the caller's progress, null when never started."""

    progress: Optional[LessonProgressResponse] = None

    @classmethod
    def from_overview(cls, overview: LessonOverview) -> "LessonOverviewResponse":
        base = LessonResponse.from_entity(overview.lesson)
        progress = (
            LessonProgressResponse.from_entity(overview.progress)
            if overview.progress is not None
            else None
        )
        return cls(**base.model_dump(), progress=progress)


class CompleteLessonRequest(CamelModel):
    score: Optional[int] = Field(None, ge=0, le=100)


class RequirementResponse(CamelModel):
    type: str
    value: int


class AchievementResponse(CamelModel):
    id: int
    title: str
    description: str
    icon: Optional[str] = None
    xp_reward: int
    requirement: RequirementResponse

    @classmethod
    def from_entity(cls, achievement: Achievement) -> "AchievementResponse":
        return cls(
            id=achievement.id,
            title=achievement.title,
            description=achievement.description,
            icon=achievement.icon,
            xp_reward=achievement.xp_reward,
            requirement=RequirementResponse(
                type=achievement.requirement.type.value,
                value=achievement.requirement.value,
            ),
        )


class AchievementStatusResponse(AchievementResponse):
    unlocked: bool
    unlocked_at: Optional[datetime] = None

    @classmethod
    def from_status(cls, status: AchievementStatus) -> "AchievementStatusResponse":
        base = AchievementResponse.from_entity(status.achievement)
        return cls(
            **base.model_dump(),
            unlocked=status.unlocked,
            unlocked_at=status.unlocked_at,
        )


class LessonCompletionResponse(CamelModel):
    message: str
    xp_earned: int
    xp: int
    level: int
    unlocked_achievements: list[AchievementResponse]

    @classmethod
    def from_entity(cls, completion: LessonCompletion) -> "LessonCompletionResponse":
        return cls(
            message="Lesson completed successfully",
            xp_earned=completion.xp_earned,
            xp=completion.xp,
            level=completion.level,
            unlocked_achievements=[
                AchievementResponse.from_entity(a) for a in completion.unlocked_achievements
            ],
        )


# ---------------------------------------------------------------------------
# Quiz
# ---------------------------------------------------------------------------


class QuizSectionResponse(CamelModel):
    id: int
    title: str
    description: str
    difficulty: str
    order: int

    @classmethod
    def from_entity(cls, section: QuizSection) -> "QuizSectionResponse":
        return cls(
            id=section.id,
            title=section.title,
            description=section.description,
            difficulty=section.difficulty,
            order=section.order,
        )


class QuizProgressResponse(CamelModel):
    section_id: int
    score: int
    best_score: int
    total_questions_answered: int
    correct_answers: int
    attempts_count: int
    last_attempt_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, progress: QuizProgress) -> "QuizProgressResponse":
        return cls(
            section_id=progress.section_id,
            score=progress.score,
            best_score=progress.best_score,
            total_questions_answered=progress.total_questions_answered,
            correct_answers=progress.correct_answers,
            attempts_count=progress.attempts_count,
            last_attempt_at=progress.last_attempt_at,
        )


class QuizQuestionResponse(CamelModel):
    id: int
    section_id: int
    term: str
    question: str
    choices: list[str]
    difficulty: str
    xp_reward: int

    @classmethod
    def from_view(cls, view: QuizQuestionView) -> "QuizQuestionResponse":
        return cls(
            id=view.id,
            section_id=view.section_id,
            term=view.term,
            question=view.question,
            choices=list(view.choices),
            difficulty=view.difficulty,
            xp_reward=view.xp_reward,
        )


class SubmitAnswerRequest(CamelModel):
    question_id: int = Field(..., ge=1)
    answer: str = Field(..., max_length=500)


class SubmitAnswerResponse(CamelModel):
    correct: bool
    xp_earned: int
    correct_answer: str

    @classmethod
    def from_entity(cls, result: QuizAnswerResult) -> "SubmitAnswerResponse":
        return cls(
            correct=result.correct,
            xp_earned=result.xp_earned,
            correct_answer=result.correct_answer,
        )


# ---------------------------------------------------------------------------
# Flashcards
# ---------------------------------------------------------------------------


class FlashcardResponse(CamelModel):
    id: int
    term: str
    definition: str
    lesson_id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, card: Flashcard) -> "FlashcardResponse":
        return cls(
            id=card.id,
            term=card.term,
            definition=card.definition,
            lesson_id=card.lesson_id,
            created_at=card.created_at,
        )


class FlashcardProgressResponse(CamelModel):
    flashcard_id: int
    ease_factor: float
    interval: int
    consecutive_correct: int
    next_review_at: datetime
    last_reviewed_at: Optional[datetime] = None
    flashcard: Optional[FlashcardResponse] = None

    @classmethod
    def from_entity(cls, progress: FlashcardProgress) -> "FlashcardProgressResponse":
        return cls(
            flashcard_id=progress.flashcard_id,
            ease_factor=progress.ease_factor,
            interval=progress.interval,
            consecutive_correct=progress.consecutive_correct,
            next_review_at=progress.next_review_at,
            last_reviewed_at=progress.last_reviewed_at,
            flashcard=(
                FlashcardResponse.from_entity(progress.flashcard)
                if progress.flashcard is not None
                else None
            ),
        )


class ReviewFlashcardRequest(CamelModel):
    correct: bool
