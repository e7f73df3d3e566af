"""
Use case: Latest quote for a symbol.

Input: symbol
Output: Quote
Side effects: One brokerage snapshot call.
Failure cases: MarketDataError.
"""

import logging

from app.domain.market.entities import Quote
from app.domain.market.ports import BrokeragePort

logger = logging.getLogger(__name__)


class GetQuoteUseCase:
    """Fetches a quote through the brokerage port."""

    def __init__(self, brokerage: BrokeragePort) -> None:
        self._brokerage = brokerage

    def execute(self, symbol: str) -> Quote:
        symbol = symbol.upper()
        logger.debug("Fetching quote for symbol=%s", symbol)
        return self._brokerage.get_quote(symbol)
