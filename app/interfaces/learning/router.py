"""
FastAPI router for the learning bounded context.

Lessons and achievements, quizzes, and spaced-repetition flashcards.
Every route requires a session. XP awards and level recomputation
happen inside the repositories' transactions.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Path, Query

from app.application.learning.complete_lesson import CompleteLessonUseCase
from app.application.learning.dtos import (
    CompleteLessonCommand,
    ReviewFlashcardCommand,
    SubmitAnswerCommand,
)
from app.application.learning.flashcards import (
    GetDueFlashcardsUseCase,
    InitializeFlashcardUseCase,
    ListFlashcardsUseCase,
    ReviewFlashcardUseCase,
)
from app.application.learning.get_lesson import GetLessonUseCase
from app.application.learning.list_achievements import ListAchievementsUseCase
from app.application.learning.list_lessons import ListLessonsUseCase
from app.application.learning.quiz_queries import (
    GetQuizProgressUseCase,
    GetQuizQuestionsUseCase,
    ListQuizSectionsUseCase,
)
from app.application.learning.submit_quiz_answer import SubmitQuizAnswerUseCase
from app.core.config import settings
from app.domain.learning.ports import FlashcardRepository, LessonRepository, QuizRepository
from app.interfaces.dependencies import get_current_user_id
from app.interfaces.learning.dependencies import (
    get_flashcard_repository,
    get_lesson_repository,
    get_quiz_repository,
)
from app.interfaces.learning.schemas import (
    AchievementStatusResponse,
    CompleteLessonRequest,
    FlashcardProgressResponse,
    FlashcardResponse,
    LessonCompletionResponse,
    LessonOverviewResponse,
    LessonResponse,
    QuizProgressResponse,
    QuizQuestionResponse,
    QuizSectionResponse,
    ReviewFlashcardRequest,
    SubmitAnswerRequest,
    SubmitAnswerResponse,
)
from app.interfaces.schemas import ErrorResponse

router = APIRouter(tags=["learning"])

_AUTH_ERRORS = {401: {"model": ErrorResponse}}
_NOT_FOUND = {401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


# ---------------------------------------------------------------------------
# Lessons and achievements
# ---------------------------------------------------------------------------


@router.get(
    "/lessons",
    response_model=list[LessonOverviewResponse],
    responses=_AUTH_ERRORS,
    summary="Curriculum with the caller's progress",
)
def list_lessons(
    user_id: int = Depends(get_current_user_id),
    repo: LessonRepository = Depends(get_lesson_repository),
) -> list[LessonOverviewResponse]:
    return [LessonOverviewResponse.from_overview(o) for o in ListLessonsUseCase(repo).execute(user_id)]


@router.get(
    "/lessons/{lesson_id}",
    response_model=LessonResponse,
    responses=_NOT_FOUND,
    summary="Lesson detail",
)
def get_lesson(
    lesson_id: int = Path(..., ge=1),
    _user_id: int = Depends(get_current_user_id),
    repo: LessonRepository = Depends(get_lesson_repository),
) -> LessonResponse:
    return LessonResponse.from_entity(GetLessonUseCase(repo).execute(lesson_id))


@router.post(
    "/lessons/{lesson_id}/complete",
    response_model=LessonCompletionResponse,
    responses={400: {"model": ErrorResponse}, **_NOT_FOUND},
    summary="Complete a lesson",
    description="Awards the lesson's XP and unlocks any achievements now met.",
)
def complete_lesson(
    lesson_id: int = Path(..., ge=1),
    body: Optional[CompleteLessonRequest] = Body(None),
    user_id: int = Depends(get_current_user_id),
    repo: LessonRepository = Depends(get_lesson_repository),
) -> LessonCompletionResponse:
    completion = CompleteLessonUseCase(repo, settings.xp_per_level).execute(
        CompleteLessonCommand(
            user_id=user_id,
            lesson_id=lesson_id,
            score=body.score if body else None,
        )
    )
    return LessonCompletionResponse.from_entity(completion)


@router.get(
    "/achievements",
    response_model=list[AchievementStatusResponse],
    responses=_AUTH_ERRORS,
    summary="Achievements with unlock state",
)
def list_achievements(
    user_id: int = Depends(get_current_user_id),
    repo: LessonRepository = Depends(get_lesson_repository),
) -> list[AchievementStatusResponse]:
    return [
        AchievementStatusResponse.from_status(s)
        for s in ListAchievementsUseCase(repo).execute(user_id)
    ]


# ---------------------------------------------------------------------------
# Quiz
# ---------------------------------------------------------------------------


@router.get(
    "/quiz/sections",
    response_model=list[QuizSectionResponse],
    responses=_AUTH_ERRORS,
    summary="Quiz sections",
)
def quiz_sections(
    _user_id: int = Depends(get_current_user_id),
    repo: QuizRepository = Depends(get_quiz_repository),
) -> list[QuizSectionResponse]:
    return [QuizSectionResponse.from_entity(s) for s in ListQuizSectionsUseCase(repo).execute()]


@router.get(
    "/quiz/progress",
    response_model=list[QuizProgressResponse],
    responses=_AUTH_ERRORS,
    summary="The caller's per-section quiz progress",
)
def quiz_progress(
    user_id: int = Depends(get_current_user_id),
    repo: QuizRepository = Depends(get_quiz_repository),
) -> list[QuizProgressResponse]:
    return [QuizProgressResponse.from_entity(p) for p in GetQuizProgressUseCase(repo).execute(user_id)]


@router.get(
    "/quiz/questions",
    response_model=list[QuizQuestionResponse],
    responses=_AUTH_ERRORS,
    summary="Quiz questions with shuffled choices",
)
def quiz_questions(
    section_id: Optional[int] = Query(None, alias="sectionId", ge=1),
    _user_id: int = Depends(get_current_user_id),
    repo: QuizRepository = Depends(get_quiz_repository),
) -> list[QuizQuestionResponse]:
    views = GetQuizQuestionsUseCase(repo).execute(section_id)
    return [QuizQuestionResponse.from_view(v) for v in views]


@router.post(
    "/quiz/submit",
    response_model=SubmitAnswerResponse,
    responses=_NOT_FOUND,
    summary="Answer a quiz question",
)
def submit_answer(
    body: SubmitAnswerRequest,
    user_id: int = Depends(get_current_user_id),
    repo: QuizRepository = Depends(get_quiz_repository),
) -> SubmitAnswerResponse:
    result = SubmitQuizAnswerUseCase(repo, settings.xp_per_level).execute(
        SubmitAnswerCommand(user_id=user_id, question_id=body.question_id, answer=body.answer)
    )
    return SubmitAnswerResponse.from_entity(result)


# ---------------------------------------------------------------------------
# Flashcards
# ---------------------------------------------------------------------------


@router.get(
    "/flashcards",
    response_model=list[FlashcardResponse],
    responses=_AUTH_ERRORS,
    summary="Flashcards, optionally for one lesson",
)
def list_flashcards(
    lesson_id: Optional[int] = Query(None, alias="lessonId", ge=1),
    _user_id: int = Depends(get_current_user_id),
    repo: FlashcardRepository = Depends(get_flashcard_repository),
) -> list[FlashcardResponse]:
    return [FlashcardResponse.from_entity(c) for c in ListFlashcardsUseCase(repo).execute(lesson_id)]


@router.get(
    "/flashcards/due",
    response_model=list[FlashcardProgressResponse],
    responses=_AUTH_ERRORS,
    summary="Cards due for review, most overdue first",
)
def due_flashcards(
    user_id: int = Depends(get_current_user_id),
    repo: FlashcardRepository = Depends(get_flashcard_repository),
) -> list[FlashcardProgressResponse]:
    return [FlashcardProgressResponse.from_entity(p) for p in GetDueFlashcardsUseCase(repo).execute(user_id)]


@router.post(
    "/flashcards/{flashcard_id}/initialize",
    response_model=FlashcardProgressResponse,
    responses={400: {"model": ErrorResponse}, **_NOT_FOUND},
    summary="Start reviewing a flashcard",
)
def initialize_flashcard(
    flashcard_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    repo: FlashcardRepository = Depends(get_flashcard_repository),
) -> FlashcardProgressResponse:
    progress = InitializeFlashcardUseCase(repo).execute(user_id, flashcard_id)
    return FlashcardProgressResponse.from_entity(progress)


@router.post(
    "/flashcards/{flashcard_id}/review",
    response_model=FlashcardProgressResponse,
    responses=_NOT_FOUND,
    summary="Record a flashcard review",
)
def review_flashcard(
    body: ReviewFlashcardRequest,
    flashcard_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    repo: FlashcardRepository = Depends(get_flashcard_repository),
) -> FlashcardProgressResponse:
    progress = ReviewFlashcardUseCase(repo).execute(
        ReviewFlashcardCommand(user_id=user_id, flashcard_id=flashcard_id, correct=body.correct)
    )
    return FlashcardProgressResponse.from_entity(progress)
