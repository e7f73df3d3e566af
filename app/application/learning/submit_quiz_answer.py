"""
Use case: Answer a quiz question.

Input: SubmitAnswerCommand (user_id, question_id, answer)
Output: QuizAnswerResult (correct, xp_earned, correct_answer)
Side effects: In one transaction: inserts user_quiz_attempts, upserts
    user_quiz_progress and, when correct, adds the question's XP to the
    user with a level recompute.
Failure cases: QuestionNotFoundError.
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from app.application.learning.dtos import SubmitAnswerCommand
from app.domain.learning.entities import QuizAnswerResult
from app.domain.learning.ports import QuizRepository
from app.domain.learning.progression import DEFAULT_XP_PER_LEVEL

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SubmitQuizAnswerUseCase:
    def __init__(
        self,
        quiz_repo: QuizRepository,
        xp_per_level: int = DEFAULT_XP_PER_LEVEL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._quiz_repo = quiz_repo
        self._xp_per_level = xp_per_level
        self._clock = clock

    def execute(self, command: SubmitAnswerCommand) -> QuizAnswerResult:
        result = self._quiz_repo.submit(
            user_id=command.user_id,
            question_id=command.question_id,
            answer=command.answer,
            xp_per_level=self._xp_per_level,
            now=self._clock(),
        )
        logger.info(
            "User id=%d answered question id=%d: correct=%s xp=+%d",
            command.user_id,
            command.question_id,
            result.correct,
            result.xp_earned,
        )
        return result
