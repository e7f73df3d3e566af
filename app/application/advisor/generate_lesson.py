"""
Use case: Generate a markdown lesson with the LLM and store it.

Input: GenerateLessonCommand (title, description, difficulty, order, xp_reward)
Output: the stored Lesson, or None when a lesson with that title exists
Side effects: One LLM call (plain text); inserts a row in lessons.
Failure cases: LLMNotConfiguredError, LLMRequestError, LLMResponseParseError.

Used from the command line to populate the curriculum; the HTTP API
never generates lessons on request.
"""

import logging
from typing import Optional

from app.application.advisor.dtos import GenerateLessonCommand
from app.domain.advisor.entities import ChatMessage, ChatRole
from app.domain.advisor.ports import LLMPort, PromptCatalog
from app.domain.learning.entities import Lesson, NewLesson
from app.domain.learning.ports import LessonRepository

logger = logging.getLogger(__name__)

LESSON_MAX_TOKENS = 4000


class GenerateLessonUseCase:
    """Writes a lesson with the lesson model unless the title is taken."""

    def __init__(
        self,
        llm: LLMPort,
        prompts: PromptCatalog,
        lesson_repo: LessonRepository,
        model: Optional[str] = None,
    ) -> None:
        self._llm = llm
        self._prompts = prompts
        self._lesson_repo = lesson_repo
        self._model = model

    def execute(self, command: GenerateLessonCommand) -> Optional[Lesson]:
        """Run the lesson generation use case.

        Args:
            command: Lesson metadata; the title doubles as the topic.

        Returns:
            The stored lesson, or None if it already existed.
        """
        if self._lesson_repo.exists_with_title(command.title):
            logger.info("Lesson %r already exists, skipping generation", command.title)
            return None

        logger.info("Generating lesson %r (%s)", command.title, command.difficulty)
        content = self._llm.complete(
            [
                ChatMessage(ChatRole.SYSTEM, self._prompts.system("lesson")),
                ChatMessage(
                    ChatRole.USER,
                    self._prompts.user(
                        "lesson", topic=command.title, difficulty=command.difficulty
                    ),
                ),
            ],
            model=self._model,
            max_tokens=LESSON_MAX_TOKENS,
        )

        lesson = self._lesson_repo.create(
            NewLesson(
                title=command.title,
                description=command.description,
                content=content,
                difficulty=command.difficulty,
                xp_reward=command.xp_reward,
                order=command.order,
            )
        )
        logger.info("Stored lesson id=%d %r", lesson.id, lesson.title)
        return lesson
