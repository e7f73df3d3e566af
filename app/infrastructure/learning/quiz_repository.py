"""
Adapter: Quiz content and progress.

Implements the QuizRepository port. Submitting an answer records the
attempt, updates the section tally and awards XP in one transaction
with the user row locked.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from app.domain.learning.entities import (
    QuizAnswerResult,
    QuizProgress,
    QuizQuestion,
    QuizSection,
)
from app.domain.learning.errors import QuestionNotFoundError
from app.domain.learning.ports import QuizRepository
from app.infrastructure.learning.experience import award_xp, lock_user
from app.infrastructure.persistence.models import (
    QuizQuestionModel,
    QuizSectionModel,
    UserQuizAttemptModel,
    UserQuizProgressModel,
)

logger = logging.getLogger(__name__)


def _progress(row: UserQuizProgressModel) -> QuizProgress:
    return QuizProgress(
        section_id=row.section_id,
        score=row.score,
        best_score=row.best_score,
        total_questions_answered=row.total_questions_answered,
        correct_answers=row.correct_answers,
        attempts_count=row.attempts_count,
        last_attempt_at=row.last_attempt_at,
    )


def _question(row: QuizQuestionModel) -> QuizQuestion:
    return QuizQuestion(
        id=row.id,
        section_id=row.section_id,
        term=row.term,
        question=row.question,
        correct_answer=row.correct_answer,
        wrong_answers=list(row.wrong_answers or []),
        difficulty=row.difficulty,
        xp_reward=row.xp_reward,
    )


class QuizRepositoryAdapter(QuizRepository):
    """SQLAlchemy adapter for quizzes."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def sections(self) -> list[QuizSection]:
        with self._session_factory() as session:
            rows = session.scalars(
                select(QuizSectionModel).order_by(QuizSectionModel.order, QuizSectionModel.id)
            )
            return [
                QuizSection(
                    id=row.id,
                    title=row.title,
                    description=row.description,
                    difficulty=row.difficulty,
                    order=row.order,
                )
                for row in rows
            ]

    def progress(self, user_id: int) -> list[QuizProgress]:
        with self._session_factory() as session:
            rows = session.scalars(
                select(UserQuizProgressModel)
                .where(UserQuizProgressModel.user_id == user_id)
                .order_by(UserQuizProgressModel.section_id)
            )
            return [_progress(row) for row in rows]

    def questions(self, section_id: Optional[int] = None) -> list[QuizQuestion]:
        with self._session_factory() as session:
            query = select(QuizQuestionModel).order_by(QuizQuestionModel.id)
            if section_id is not None:
                query = query.where(QuizQuestionModel.section_id == section_id)
            return [_question(row) for row in session.scalars(query)]

    def submit(
        self, user_id: int, question_id: int, answer: str, xp_per_level: int, now: datetime
    ) -> QuizAnswerResult:
        with self._session_factory.begin() as session:
            row = session.get(QuizQuestionModel, question_id)
            if row is None:
                raise QuestionNotFoundError(question_id)
            question = _question(row)
            correct = question.is_correct(answer)
            xp_earned = question.xp_reward if correct else 0
            # one user's submits run one at a time
            user = lock_user(session, user_id)

            session.add(
                UserQuizAttemptModel(
                    user_id=user_id, question_id=question_id, correct=correct, attempted_at=now
                )
            )

            tally = session.scalar(
                select(UserQuizProgressModel)
                .where(
                    UserQuizProgressModel.user_id == user_id,
                    UserQuizProgressModel.section_id == question.section_id,
                )
                .with_for_update()
            )
            if tally is None:
                tally = UserQuizProgressModel(user_id=user_id, section_id=question.section_id)
                session.add(tally)
            updated = _progress_or_empty(tally, question.section_id).record(
                correct, question.xp_reward, now
            )
            tally.score = updated.score
            tally.best_score = updated.best_score
            tally.total_questions_answered = updated.total_questions_answered
            tally.correct_answers = updated.correct_answers
            tally.attempts_count = updated.attempts_count
            tally.last_attempt_at = updated.last_attempt_at

            if correct:
                award_xp(user, xp_earned, xp_per_level)

            return QuizAnswerResult(
                question_id=question_id,
                correct=correct,
                xp_earned=xp_earned,
                correct_answer=question.correct_answer,
            )


def _progress_or_empty(row: UserQuizProgressModel, section_id: int) -> QuizProgress:
    """A freshly added row has no column defaults applied yet."""
    if row.id is None:
        return QuizProgress(section_id=section_id)
    return _progress(row)
