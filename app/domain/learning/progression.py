"""
Domain service: XP, levels and achievement unlocking.

Pure business logic. No IO, no frameworks.

A user levels up every `xp_per_level` XP, starting at level 1.
Achievements are checked one by one in the order given; the XP bonus
of each unlocked achievement counts towards the ones after it.
"""

from dataclasses import dataclass, field

from app.domain.learning.entities import Achievement, LearnerStats, RequirementType

DEFAULT_XP_PER_LEVEL = 1000


def level_for_xp(xp: int, xp_per_level: int = DEFAULT_XP_PER_LEVEL) -> int:
    """Return the level reached with `xp` total experience."""
    return max(xp, 0) // xp_per_level + 1


def requirement_met(achievement: Achievement, stats: LearnerStats) -> bool:
    requirement = achievement.requirement
    if requirement.type is RequirementType.LESSONS_COMPLETED:
        return stats.lessons_completed >= requirement.value
    if requirement.type is RequirementType.XP_REACHED:
        return stats.xp >= requirement.value
    if requirement.type is RequirementType.LEVEL_REACHED:
        return stats.level >= requirement.value
    return False


@dataclass(frozen=True)
class Unlocks:
    """Achievements unlocked by one evaluation and the resulting stats."""

    stats: LearnerStats
    achievements: list[Achievement] = field(default_factory=list)

    @property
    def xp_awarded(self) -> int:
        return sum(a.xp_reward for a in self.achievements)


def evaluate_achievements(
    candidates: list[Achievement],
    stats: LearnerStats,
    xp_per_level: int = DEFAULT_XP_PER_LEVEL,
) -> Unlocks:
    """Unlock every candidate whose requirement is met.

    Args:
        candidates: Achievements the user has not unlocked yet.
        stats: The user's figures before any achievement bonus.

    Returns:
        The unlocked achievements and the stats after their XP bonuses.
    """
    unlocked: list[Achievement] = []
    for achievement in candidates:
        if not requirement_met(achievement, stats):
            continue
        unlocked.append(achievement)
        xp = stats.xp + achievement.xp_reward
        stats = LearnerStats(
            xp=xp,
            level=level_for_xp(xp, xp_per_level),
            lessons_completed=stats.lessons_completed,
        )
    return Unlocks(stats=stats, achievements=unlocked)
