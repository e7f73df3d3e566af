"""
Adapter: Lessons, lesson progress and achievements.

Implements the LessonRepository port. Completing a lesson is one
transaction: progress row, lesson XP, then every achievement whose
requirement is now met (see app.domain.learning.progression).
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, sessionmaker

from app.domain.learning.entities import (
    Achievement,
    AchievementRequirement,
    AchievementStatus,
    LearnerStats,
    Lesson,
    LessonCompletion,
    LessonOverview,
    LessonProgress,
    NewLesson,
    RequirementType,
)
from app.domain.learning.errors import LessonAlreadyCompletedError, LessonNotFoundError
from app.domain.learning.ports import LessonRepository
from app.domain.learning.progression import evaluate_achievements
from app.infrastructure.learning.experience import award_xp, lock_user
from app.infrastructure.persistence.models import (
    AchievementModel,
    LessonModel,
    UserAchievementModel,
    UserProgressModel,
)

logger = logging.getLogger(__name__)


def to_lesson(row: LessonModel) -> Lesson:
    return Lesson(
        id=row.id,
        title=row.title,
        description=row.description,
        content=row.content,
        difficulty=row.difficulty,
        xp_reward=row.xp_reward,
        order=row.order,
        prerequisites=list(row.prerequisites or []),
        created_at=row.created_at,
    )


def to_achievement(row: AchievementModel) -> Achievement:
    requirement = row.requirement or {}
    return Achievement(
        id=row.id,
        title=row.title,
        description=row.description,
        requirement=AchievementRequirement(
            type=RequirementType(requirement.get("type")),
            value=int(requirement.get("value", 0)),
        ),
        xp_reward=row.xp_reward,
        icon=row.icon,
    )


class LessonRepositoryAdapter(LessonRepository):
    """SQLAlchemy adapter for lessons and achievements."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def list_with_progress(self, user_id: int) -> list[LessonOverview]:
        with self._session_factory() as session:
            lessons = session.scalars(
                select(LessonModel).order_by(LessonModel.order, LessonModel.id)
            ).all()
            progress = {
                row.lesson_id: row
                for row in session.scalars(
                    select(UserProgressModel).where(UserProgressModel.user_id == user_id)
                )
            }
            return [
                LessonOverview(
                    lesson=to_lesson(lesson),
                    progress=(
                        LessonProgress(
                            lesson_id=lesson.id,
                            completed=progress[lesson.id].completed,
                            score=progress[lesson.id].score,
                            completed_at=progress[lesson.id].completed_at,
                        )
                        if lesson.id in progress
                        else None
                    ),
                )
                for lesson in lessons
            ]

    def get(self, lesson_id: int) -> Optional[Lesson]:
        with self._session_factory() as session:
            row = session.get(LessonModel, lesson_id)
            return to_lesson(row) if row else None

    def exists_with_title(self, title: str) -> bool:
        with self._session_factory() as session:
            return session.scalar(
                select(LessonModel.id).where(LessonModel.title == title)
            ) is not None

    def create(self, lesson: NewLesson) -> Lesson:
        with self._session_factory.begin() as session:
            row = LessonModel(
                title=lesson.title,
                description=lesson.description,
                content=lesson.content,
                difficulty=lesson.difficulty,
                xp_reward=lesson.xp_reward,
                order=lesson.order,
                prerequisites=list(lesson.prerequisites),
            )
            session.add(row)
            session.flush()
            return to_lesson(row)

    def complete(
        self, user_id: int, lesson_id: int, score: Optional[int], xp_per_level: int
    ) -> LessonCompletion:
        now = datetime.now(timezone.utc)
        with self._session_factory.begin() as session:
            lesson = session.get(LessonModel, lesson_id)
            if lesson is None:
                raise LessonNotFoundError(lesson_id)

            user = lock_user(session, user_id)

            progress = session.scalar(
                select(UserProgressModel).where(
                    UserProgressModel.user_id == user_id,
                    UserProgressModel.lesson_id == lesson_id,
                )
            )
            if progress is not None and progress.completed:
                raise LessonAlreadyCompletedError(lesson_id)
            if progress is None:
                progress = UserProgressModel(user_id=user_id, lesson_id=lesson_id)
                session.add(progress)
            progress.completed = True
            progress.score = score
            progress.completed_at = now

            xp_before = user.xp
            award_xp(user, lesson.xp_reward, xp_per_level)
            session.flush()

            unlocks = evaluate_achievements(
                self._locked_achievements(session, user_id),
                LearnerStats(
                    xp=user.xp,
                    level=user.level,
                    lessons_completed=self._completed_count(session, user_id),
                ),
                xp_per_level,
            )
            for achievement in unlocks.achievements:
                session.add(
                    UserAchievementModel(
                        user_id=user_id, achievement_id=achievement.id, unlocked_at=now
                    )
                )
            award_xp(user, unlocks.xp_awarded, xp_per_level)

            return LessonCompletion(
                lesson_id=lesson_id,
                xp_earned=user.xp - xp_before,
                xp=user.xp,
                level=user.level,
                unlocked_achievements=unlocks.achievements,
            )

    def achievements(self, user_id: int) -> list[AchievementStatus]:
        with self._session_factory() as session:
            unlocked = dict(
                session.execute(
                    select(
                        UserAchievementModel.achievement_id, UserAchievementModel.unlocked_at
                    ).where(UserAchievementModel.user_id == user_id)
                ).all()
            )
            return [
                AchievementStatus(
                    achievement=to_achievement(row), unlocked_at=unlocked.get(row.id)
                )
                for row in session.scalars(select(AchievementModel).order_by(AchievementModel.id))
            ]

    @staticmethod
    def _completed_count(session: Session, user_id: int) -> int:
        return session.scalar(
            select(func.count(UserProgressModel.id)).where(
                UserProgressModel.user_id == user_id,
                UserProgressModel.completed.is_(True),
            )
        ) or 0

    @staticmethod
    def _locked_achievements(session: Session, user_id: int) -> list[Achievement]:
        already = select(UserAchievementModel.achievement_id).where(
            UserAchievementModel.user_id == user_id
        )
        rows = session.scalars(
            select(AchievementModel)
            .where(AchievementModel.id.not_in(already))
            .order_by(AchievementModel.id)
        )
        return [to_achievement(row) for row in rows]
