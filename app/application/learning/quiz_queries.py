"""
Use cases: Read-only quiz queries.

- ListQuizSectionsUseCase: sections ordered by `order`.
- GetQuizProgressUseCase: the caller's progress per attempted section.
- GetQuizQuestionsUseCase: questions (optionally for one section) with
  shuffled choices and no answer key.

Side effects: None. Failure cases: None.
"""

import random
from typing import Optional

from app.application.learning.dtos import QuizQuestionView
from app.domain.learning.entities import QuizProgress, QuizSection
from app.domain.learning.ports import QuizRepository


class ListQuizSectionsUseCase:
    def __init__(self, quiz_repo: QuizRepository) -> None:
        self._quiz_repo = quiz_repo

    def execute(self) -> list[QuizSection]:
        return self._quiz_repo.sections()


class GetQuizProgressUseCase:
    def __init__(self, quiz_repo: QuizRepository) -> None:
        self._quiz_repo = quiz_repo

    def execute(self, user_id: int) -> list[QuizProgress]:
        return self._quiz_repo.progress(user_id)


class GetQuizQuestionsUseCase:
    """Hides the answer key by shuffling it into the choices.

    Pass a seeded `rng` for a deterministic order.
    """

    def __init__(self, quiz_repo: QuizRepository, rng: Optional[random.Random] = None) -> None:
        self._quiz_repo = quiz_repo
        self._rng = rng

    def execute(self, section_id: Optional[int] = None) -> list[QuizQuestionView]:
        return [
            QuizQuestionView(
                id=question.id,
                section_id=question.section_id,
                term=question.term,
                question=question.question,
                choices=question.choices(self._rng),
                difficulty=question.difficulty,
                xp_reward=question.xp_reward,
            )
            for question in self._quiz_repo.questions(section_id)
        ]
