"""
Use case: The curriculum with the caller's progress.

Input: user id
Output: list[LessonOverview], ordered by lesson order
Side effects: None.
Failure cases: None.
"""

from app.domain.learning.entities import LessonOverview
from app.domain.learning.ports import LessonRepository


class ListLessonsUseCase:
    def __init__(self, lesson_repo: LessonRepository) -> None:
        self._lesson_repo = lesson_repo

    def execute(self, user_id: int) -> list[LessonOverview]:
        return self._lesson_repo.list_with_progress(user_id)
