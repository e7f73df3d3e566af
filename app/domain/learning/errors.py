"""
Domain-specific errors for the learning bounded context.

These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from app.domain.errors import NotFoundError, RuleViolationError


class LessonNotFoundError(NotFoundError):
    """Raised when a lesson id does not resolve to a lesson."""

    def __init__(self, lesson_id: int) -> None:
        super().__init__("Lesson not found")
        self.lesson_id = lesson_id


class LessonAlreadyCompletedError(RuleViolationError):
    """Raised when completing a lesson the user already completed."""

    def __init__(self, lesson_id: int) -> None:
        super().__init__("Lesson already completed")
        self.lesson_id = lesson_id


class QuestionNotFoundError(NotFoundError):
    """Raised when a quiz question id does not resolve to a question."""

    def __init__(self, question_id: int) -> None:
        super().__init__("Question not found")
        self.question_id = question_id


class FlashcardNotFoundError(NotFoundError):
    """Raised when a flashcard id does not resolve to a flashcard."""

    def __init__(self, flashcard_id: int) -> None:
        super().__init__("Flashcard not found")
        self.flashcard_id = flashcard_id


class FlashcardProgressNotFoundError(NotFoundError):
    """Raised when reviewing a flashcard the user never initialised."""

    def __init__(self, flashcard_id: int) -> None:
        super().__init__("Flashcard progress not found")
        self.flashcard_id = flashcard_id


class ProgressAlreadyInitializedError(RuleViolationError):
    """Raised when initialising flashcard progress a second time."""

    def __init__(self, flashcard_id: int) -> None:
        super().__init__("Progress already initialized")
        self.flashcard_id = flashcard_id
