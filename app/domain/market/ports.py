"""
Port interfaces (ABCs) for the market bounded context.

The brokerage port is the whole trading surface: the application never
simulates fills or balances itself, it only reshapes what the
brokerage returns.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from app.domain.market.entities import (
    Account,
    NewsArticle,
    Order,
    OrderRequest,
    Position,
    PriceBar,
    Quote,
)


class BrokeragePort(ABC):
    """Port for a brokerage trading/data API."""

    @abstractmethod
    def get_quote(self, symbol: str) -> Quote:
        """Return the latest quote for a symbol.

        Raises:
            MarketDataError: If the brokerage call fails.
        """
        raise NotImplementedError

    @abstractmethod
    def get_bars(
        self, symbol: str, bar_size: str, start: datetime, end: datetime
    ) -> list[PriceBar]:
        """Return OHLCV bars of the given size between start and end.

        Raises:
            MarketDataError: If the brokerage call fails.
        """
        raise NotImplementedError

    @abstractmethod
    def get_positions(self) -> list[Position]:
        """Return open positions.

        Raises:
            MarketDataError: If the brokerage call fails.
        """
        raise NotImplementedError

    @abstractmethod
    def get_account(self) -> Account:
        """Return account balances.

        Raises:
            MarketDataError: If the brokerage call fails.
        """
        raise NotImplementedError

    @abstractmethod
    def submit_order(self, order: OrderRequest) -> Order:
        """Submit an order and return the brokerage acknowledgement.

        Raises:
            TradeExecutionError: If the brokerage rejects the order or is unreachable.
        """
        raise NotImplementedError


class NewsPort(ABC):
    """Port for retrieving market news."""

    @abstractmethod
    def latest(self) -> list[NewsArticle]:
        """Return the latest headlines, newest first."""
        raise NotImplementedError
