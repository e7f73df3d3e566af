"""
Domain entities for the market bounded context.

Value objects reshaped from brokerage responses, plus the
stock catalog and news article records.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class OrderSide(Enum):
    """Direction of an order."""

    BUY = "buy"
    SELL = "sell"


class OrderType(Enum):
    """Order execution type."""

    MARKET = "market"
    LIMIT = "limit"


class TimeInForce(Enum):
    """How long an order stays working."""

    DAY = "day"
    GTC = "gtc"


@dataclass(frozen=True)
class BrokerageCredentials:
    """API key pair used to authenticate against the brokerage."""

    key_id: str
    secret_key: str


@dataclass(frozen=True)
class Quote:
    """Latest quote for a symbol."""

    symbol: str
    price: float
    timestamp: Optional[str]
    volume: int
    change: float
    change_percent: float


@dataclass(frozen=True)
class PriceBar:
    """A single OHLCV bar for charting."""

    time: str
    open: float
    high: float
    low: float
    close: float
    volume: int


@dataclass(frozen=True)
class Position:
    """An open position held at the brokerage."""

    symbol: str
    qty: float
    market_value: float
    unrealized_pl: float
    unrealized_pl_percent: float


@dataclass(frozen=True)
class Account:
    """Brokerage account balances."""

    cash: float
    portfolio_value: float
    buying_power: float


@dataclass(frozen=True)
class OrderRequest:
    """An order to submit to the brokerage."""

    symbol: str
    qty: float
    side: OrderSide
    type: OrderType
    time_in_force: TimeInForce
    limit_price: Optional[float] = None


@dataclass(frozen=True)
class Order:
    """An order as acknowledged by the brokerage."""

    id: str
    symbol: str
    qty: float
    side: str
    type: str
    time_in_force: str
    status: str
    limit_price: Optional[float] = None
    submitted_at: Optional[str] = None


@dataclass(frozen=True)
class StockListing:
    """A stock in the searchable catalog."""

    symbol: str
    name: str
    description: str
    sector: str
    similar: tuple[str, ...] = ()


@dataclass(frozen=True)
class StockSearchResult:
    """A catalog match enriched with the similar stocks it references."""

    stock: StockListing
    similar_stocks: list[StockListing] = field(default_factory=list)


@dataclass(frozen=True)
class NewsArticle:
    """A market news headline."""

    title: str
    summary: str
    url: str
    source: str
    date: str
