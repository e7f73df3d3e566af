"""
Domain service: spaced-repetition flashcard scheduling.

Pure business logic. No IO, no frameworks.

Rules:
- A failed review resets the interval to 1 day and lowers the ease
  factor by 0.2, never below 1.3.
- A successful first review (interval 0) schedules the card for
  tomorrow and keeps the ease factor.
- Any other successful review multiplies the interval by the ease
  factor (rounded half up) and raises the ease factor by 0.1, never
  above 2.5.
"""

import math
from dataclasses import replace
from datetime import datetime, timedelta

from app.domain.learning.entities import FlashcardProgress, ReviewSchedule

MIN_EASE_FACTOR = 1.3
MAX_EASE_FACTOR = 2.5
INITIAL_EASE_FACTOR = MAX_EASE_FACTOR
EASE_PENALTY = 0.2
EASE_BONUS = 0.1


def _clamp_ease(value: float) -> float:
    # two decimals keep 2.3 + 0.1 from drifting to 2.4000000000000004
    return round(min(MAX_EASE_FACTOR, max(MIN_EASE_FACTOR, value)), 2)


def calculate_next_review(ease_factor: float, interval: int, correct: bool) -> ReviewSchedule:
    """Return the schedule that follows a review."""
    if not correct:
        return ReviewSchedule(interval=1, ease_factor=_clamp_ease(ease_factor - EASE_PENALTY))

    if interval == 0:
        return ReviewSchedule(interval=1, ease_factor=ease_factor)

    next_interval = math.floor(interval * ease_factor + 0.5)
    return ReviewSchedule(
        interval=next_interval,
        ease_factor=_clamp_ease(ease_factor + EASE_BONUS),
    )


def new_progress(flashcard_id: int, now: datetime) -> FlashcardProgress:
    """Return the schedule of a card that has never been reviewed: due now."""
    return FlashcardProgress(
        flashcard_id=flashcard_id,
        ease_factor=INITIAL_EASE_FACTOR,
        interval=0,
        consecutive_correct=0,
        last_reviewed_at=now,
        next_review_at=now,
    )


def apply_review(progress: FlashcardProgress, correct: bool, now: datetime) -> FlashcardProgress:
    """Return the progress after reviewing the card at `now`."""
    schedule = calculate_next_review(progress.ease_factor, progress.interval, correct)
    return replace(
        progress,
        ease_factor=schedule.ease_factor,
        interval=schedule.interval,
        consecutive_correct=progress.consecutive_correct + 1 if correct else 0,
        last_reviewed_at=now,
        next_review_at=now + timedelta(days=schedule.interval),
    )
