"""
Data Transfer Objects for the market application layer.

DTOs carry data between the interface and application layers.
Results are the domain value objects themselves: quotes, bars,
positions and orders are already flat, immutable records.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GetPriceHistoryQuery:
    """Input DTO for chart history.

    Attributes:
        symbol: Ticker symbol, upper-cased by the use case.
        timeframe: One of 1D, 1W, 1M, 3M, YTD, 1Y.
    """

    symbol: str
    timeframe: str = "1D"


@dataclass(frozen=True)
class PlaceOrderCommand:
    """Input DTO for a paper trade.

    Attributes:
        qty: Number of shares, strictly positive.
        side: "buy" or "sell".
        type: "market" or "limit".
        time_in_force: "day" or "gtc".
        limit_price: Required when type is "limit".
    """

    symbol: str
    qty: float
    side: str
    type: str = "market"
    time_in_force: str = "day"
    limit_price: Optional[float] = None
