"""
Use case: Chart history for a symbol.

Input: GetPriceHistoryQuery (symbol, timeframe)
Output: list[PriceBar]
Side effects: One brokerage bars call.
Failure cases: UnknownTimeframeError, MarketDataError.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from app.application.market.dtos import GetPriceHistoryQuery
from app.domain.market.entities import PriceBar
from app.domain.market.ports import BrokeragePort
from app.domain.market.timeframes import bar_window, parse_timeframe

logger = logging.getLogger(__name__)


class GetPriceHistoryUseCase:
    """Resolves the timeframe to a bar size and window, then fetches bars.

    `clock` exists so tests can pin "now".
    """

    def __init__(
        self,
        brokerage: BrokeragePort,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._brokerage = brokerage
        self._clock = clock

    def execute(self, query: GetPriceHistoryQuery) -> list[PriceBar]:
        """Run the history use case.

        Args:
            query: Symbol and timeframe.

        Returns:
            Bars in chronological order, as returned by the brokerage.
        """
        timeframe = parse_timeframe(query.timeframe)
        window = bar_window(timeframe, self._clock() if self._clock else None)
        symbol = query.symbol.upper()

        logger.info(
            "Fetching %s bars for symbol=%s timeframe=%s",
            window.bar_size,
            symbol,
            timeframe.value,
        )
        return self._brokerage.get_bars(symbol, window.bar_size, window.start, window.end)
