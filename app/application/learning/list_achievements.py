"""
Use case: Every achievement with the caller's unlock state.

Input: user id
Output: list[AchievementStatus]
Side effects: None.
Failure cases: None.
"""

from app.domain.learning.entities import AchievementStatus
from app.domain.learning.ports import LessonRepository


class ListAchievementsUseCase:
    def __init__(self, lesson_repo: LessonRepository) -> None:
        self._lesson_repo = lesson_repo

    def execute(self, user_id: int) -> list[AchievementStatus]:
        return self._lesson_repo.achievements(user_id)
