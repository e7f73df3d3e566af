"""
Use case: One lesson with its content.

Input: lesson id
Output: Lesson
Side effects: None.
Failure cases: LessonNotFoundError.
"""

from app.domain.learning.entities import Lesson
from app.domain.learning.errors import LessonNotFoundError
from app.domain.learning.ports import LessonRepository


class GetLessonUseCase:
    def __init__(self, lesson_repo: LessonRepository) -> None:
        self._lesson_repo = lesson_repo

    def execute(self, lesson_id: int) -> Lesson:
        lesson = self._lesson_repo.get(lesson_id)
        if lesson is None:
            raise LessonNotFoundError(lesson_id)
        return lesson
