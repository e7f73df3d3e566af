"""
Tests for the learning domain layer.

Covers the spaced-repetition scheduler, XP/level progression,
achievement unlocking and quiz bookkeeping. Pure functions, no IO.
"""

import random
from datetime import datetime, timedelta, timezone

import pytest

from app.domain.learning.entities import (
    Achievement,
    AchievementRequirement,
    LearnerStats,
    QuizProgress,
    QuizQuestion,
    RequirementType,
)
from app.domain.learning.progression import evaluate_achievements, level_for_xp
from app.domain.learning.spaced_repetition import (
    MAX_EASE_FACTOR,
    MIN_EASE_FACTOR,
    apply_review,
    calculate_next_review,
    new_progress,
)

NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def _achievement(
    id: int, kind: RequirementType, value: int, xp_reward: int = 50
) -> Achievement:
    return Achievement(
        id=id,
        title=f"Achievement {id}",
        description="",
        requirement=AchievementRequirement(type=kind, value=value),
        xp_reward=xp_reward,
    )


# ══════════════════════════════════════════════════════════════════════
# Spaced repetition
# ══════════════════════════════════════════════════════════════════════


class TestCalculateNextReview:
    """Tests for the review scheduling law."""

    def test_failure_resets_interval_and_lowers_ease(self) -> None:
        """A failed review schedules tomorrow with ease - 0.2."""
        schedule = calculate_next_review(2.5, 10, correct=False)
        assert schedule.interval == 1
        assert schedule.ease_factor == 2.3

    def test_failure_never_drops_below_minimum_ease(self) -> None:
        """Ease is floored at 1.3."""
        schedule = calculate_next_review(1.4, 3, correct=False)
        assert schedule.ease_factor == MIN_EASE_FACTOR

    def test_first_success_keeps_ease(self) -> None:
        """Interval 0 goes to 1 day without touching the ease factor."""
        schedule = calculate_next_review(2.5, 0, correct=True)
        assert schedule.interval == 1
        assert schedule.ease_factor == 2.5

    def test_success_multiplies_interval(self) -> None:
        """Interval grows by the ease factor, rounded half up."""
        schedule = calculate_next_review(2.5, 1, correct=True)
        # 1 * 2.5 = 2.5 rounds up to 3
        assert schedule.interval == 3
        assert schedule.ease_factor == MAX_EASE_FACTOR

    def test_success_raises_ease_without_float_drift(self) -> None:
        """2.3 + 0.1 is exactly 2.4."""
        schedule = calculate_next_review(2.3, 4, correct=True)
        assert schedule.interval == 9
        assert schedule.ease_factor == 2.4

    @pytest.mark.parametrize("ease", [1.3, 1.55, 2.0, 2.5])
    @pytest.mark.parametrize("interval", [1, 2, 7, 30])
    def test_success_never_shortens_interval(self, ease: float, interval: int) -> None:
        """With ease >= 1.3 a successful review never shortens the interval."""
        schedule = calculate_next_review(ease, interval, correct=True)
        assert schedule.interval >= interval
        assert MIN_EASE_FACTOR <= schedule.ease_factor <= MAX_EASE_FACTOR


class TestApplyReview:
    """Tests for applying a review to stored progress."""

    def test_new_progress_is_due_now(self) -> None:
        """A fresh card starts at ease 2.5, interval 0, due immediately."""
        progress = new_progress(7, NOW)
        assert progress.ease_factor == 2.5
        assert progress.interval == 0
        assert progress.consecutive_correct == 0
        assert progress.next_review_at == NOW

    def test_correct_review_advances_streak_and_due_date(self) -> None:
        """consecutive_correct increments and the card moves interval days out."""
        progress = apply_review(new_progress(7, NOW), True, NOW)
        assert progress.consecutive_correct == 1
        assert progress.last_reviewed_at == NOW
        assert progress.next_review_at == NOW + timedelta(days=1)

    def test_wrong_review_resets_streak(self) -> None:
        """A miss resets the streak to zero."""
        progress = apply_review(new_progress(7, NOW), True, NOW)
        progress = apply_review(progress, False, NOW)
        assert progress.consecutive_correct == 0
        assert progress.interval == 1


# ══════════════════════════════════════════════════════════════════════
# Progression
# ══════════════════════════════════════════════════════════════════════


class TestLevelForXp:
    """Tests for the level formula."""

    @pytest.mark.parametrize(
        "xp,level", [(0, 1), (999, 1), (1000, 2), (2500, 3), (-5, 1)]
    )
    def test_level_boundaries(self, xp: int, level: int) -> None:
        """Level = xp // 1000 + 1."""
        assert level_for_xp(xp) == level

    def test_custom_level_size(self) -> None:
        """The level size is configurable."""
        assert level_for_xp(250, xp_per_level=100) == 3


class TestEvaluateAchievements:
    """Tests for achievement unlocking."""

    def test_unlocks_only_met_requirements(self) -> None:
        """Unmet achievements stay locked."""
        candidates = [
            _achievement(1, RequirementType.LESSONS_COMPLETED, 1),
            _achievement(2, RequirementType.LESSONS_COMPLETED, 5),
        ]
        unlocks = evaluate_achievements(
            candidates, LearnerStats(xp=100, level=1, lessons_completed=1)
        )
        assert [a.id for a in unlocks.achievements] == [1]
        assert unlocks.xp_awarded == 50
        assert unlocks.stats.xp == 150

    def test_bonus_xp_counts_towards_later_achievements(self) -> None:
        """An earlier unlock's XP can satisfy a later XP requirement."""
        candidates = [
            _achievement(1, RequirementType.LESSONS_COMPLETED, 1, xp_reward=450),
            _achievement(2, RequirementType.XP_REACHED, 500),
        ]
        unlocks = evaluate_achievements(
            candidates, LearnerStats(xp=100, level=1, lessons_completed=1)
        )
        assert [a.id for a in unlocks.achievements] == [1, 2]
        assert unlocks.stats.xp == 600

    def test_level_recomputed_after_each_award(self) -> None:
        """A bonus that crosses a level boundary unlocks level achievements."""
        candidates = [
            _achievement(1, RequirementType.XP_REACHED, 900, xp_reward=200),
            _achievement(2, RequirementType.LEVEL_REACHED, 2),
        ]
        unlocks = evaluate_achievements(
            candidates, LearnerStats(xp=900, level=1, lessons_completed=0)
        )
        assert unlocks.stats.level == 2
        assert len(unlocks.achievements) == 2

    def test_nothing_unlocked(self) -> None:
        """No candidates met leaves stats untouched."""
        stats = LearnerStats(xp=0, level=1, lessons_completed=0)
        unlocks = evaluate_achievements(
            [_achievement(1, RequirementType.LEVEL_REACHED, 3)], stats
        )
        assert unlocks.achievements == []
        assert unlocks.stats == stats


# ══════════════════════════════════════════════════════════════════════
# Quiz
# ══════════════════════════════════════════════════════════════════════


class TestQuizQuestion:
    """Tests for answer checking and choice shuffling."""

    question = QuizQuestion(
        id=1,
        section_id=1,
        term="Volume",
        question="What does trading volume measure?",
        correct_answer="Shares traded",
        wrong_answers=["Price change", "Listed companies", "Market cap"],
        difficulty="Beginner",
        xp_reward=10,
    )

    def test_answer_is_trimmed(self) -> None:
        """Surrounding whitespace does not make an answer wrong."""
        assert self.question.is_correct("  Shares traded ")
        assert not self.question.is_correct("Price change")

    def test_choices_contain_every_answer(self) -> None:
        """Choices are the correct answer plus all wrong answers."""
        choices = self.question.choices(random.Random(3))
        assert sorted(choices) == sorted(
            ["Shares traded", "Price change", "Listed companies", "Market cap"]
        )


class TestQuizProgress:
    """Tests for the per-section tally."""

    def test_correct_answer_adds_score(self) -> None:
        """Correct answers add XP to score and raise best score."""
        progress = QuizProgress(section_id=1).record(True, 10, NOW)
        assert progress.score == 10
        assert progress.best_score == 10
        assert progress.correct_answers == 1
        assert progress.total_questions_answered == 1
        assert progress.attempts_count == 1
        assert progress.last_attempt_at == NOW

    def test_wrong_answer_only_counts_attempt(self) -> None:
        """Wrong answers count as answered but do not score."""
        progress = QuizProgress(section_id=1, score=20, best_score=30).record(False, 10, NOW)
        assert progress.score == 20
        assert progress.best_score == 30
        assert progress.correct_answers == 0
        assert progress.total_questions_answered == 1
