"""
Use case: Complete a lesson and collect its rewards.

Input: CompleteLessonCommand (user_id, lesson_id, score?)
Output: LessonCompletion (xp earned, new xp and level, unlocked achievements)
Side effects: In one transaction: upserts user_progress, adds XP to the
    user, recomputes the level, inserts user_achievements for every newly
    met requirement and adds their XP.
Failure cases: LessonNotFoundError, LessonAlreadyCompletedError.
"""

import logging

from app.application.learning.dtos import CompleteLessonCommand
from app.domain.learning.entities import LessonCompletion
from app.domain.learning.ports import LessonRepository
from app.domain.learning.progression import DEFAULT_XP_PER_LEVEL

logger = logging.getLogger(__name__)


class CompleteLessonUseCase:
    """Delegates the whole sequence to the repository so it stays atomic.

    The repository applies `app.domain.learning.progression` inside the
    transaction; this class only carries the level size and logs.
    """

    def __init__(
        self, lesson_repo: LessonRepository, xp_per_level: int = DEFAULT_XP_PER_LEVEL
    ) -> None:
        self._lesson_repo = lesson_repo
        self._xp_per_level = xp_per_level

    def execute(self, command: CompleteLessonCommand) -> LessonCompletion:
        """Run the lesson completion use case.

        Args:
            command: Who completes which lesson, with an optional score.

        Returns:
            The rewards earned and the user's new totals.
        """
        completion = self._lesson_repo.complete(
            user_id=command.user_id,
            lesson_id=command.lesson_id,
            score=command.score,
            xp_per_level=self._xp_per_level,
        )
        logger.info(
            "User id=%d completed lesson id=%d: +%d XP (xp=%d, level=%d, achievements=%s)",
            command.user_id,
            command.lesson_id,
            completion.xp_earned,
            completion.xp,
            completion.level,
            [a.title for a in completion.unlocked_achievements],
        )
        return completion
