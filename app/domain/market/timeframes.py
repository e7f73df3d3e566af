"""
Chart timeframe resolution.

Maps the chart's timeframe selector (1D, 1W, ...) to a bar size and
a time window ending now.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

from app.domain.market.errors import UnknownTimeframeError


class Timeframe(Enum):
    """Chart timeframes offered to the user."""

    ONE_DAY = "1D"
    ONE_WEEK = "1W"
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    YEAR_TO_DATE = "YTD"
    ONE_YEAR = "1Y"


@dataclass(frozen=True)
class BarWindow:
    """Bar size and [start, end] window to request from the brokerage."""

    bar_size: str
    start: datetime
    end: datetime


_LOOKBACK: dict[Timeframe, tuple[str, Optional[timedelta]]] = {
    Timeframe.ONE_DAY: ("5Min", timedelta(days=1)),
    Timeframe.ONE_WEEK: ("1Hour", timedelta(days=7)),
    Timeframe.ONE_MONTH: ("1Day", timedelta(days=30)),
    Timeframe.THREE_MONTHS: ("1Day", timedelta(days=90)),
    Timeframe.YEAR_TO_DATE: ("1Day", None),
    Timeframe.ONE_YEAR: ("1Day", timedelta(days=365)),
}


def parse_timeframe(value: str) -> Timeframe:
    """Parse a timeframe string (case-insensitive).

    Raises:
        UnknownTimeframeError: If the value is not a supported timeframe.
    """
    try:
        return Timeframe(value.upper())
    except ValueError:
        raise UnknownTimeframeError(value) from None


def bar_window(timeframe: Timeframe, now: Optional[datetime] = None) -> BarWindow:
    """Return the bar size and window for a timeframe ending at `now` (UTC)."""
    end = now or datetime.now(timezone.utc)
    bar_size, lookback = _LOOKBACK[timeframe]
    if lookback is None:
        start = end.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
    else:
        start = end - lookback
    return BarWindow(bar_size=bar_size, start=start, end=end)
