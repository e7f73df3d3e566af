"""
Pydantic schemas for market API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from typing import Literal, Optional

from pydantic import Field

from app.domain.market.entities import (
    Account,
    NewsArticle,
    Order,
    Position,
    PriceBar,
    Quote,
    StockListing,
    StockSearchResult,
)
from app.interfaces.schemas import CamelModel

SYMBOL_PATTERN = r"^[A-Za-z.]{1,10}$"


class QuoteResponse(CamelModel):
    symbol: str
    price: float
    timestamp: Optional[str] = None
    volume: int
    change: float
    change_percent: float

    @classmethod
    def from_entity(cls, quote: Quote) -> "QuoteResponse":
        return cls(
            symbol=quote.symbol,
            price=quote.price,
            timestamp=quote.timestamp,
            volume=quote.volume,
            change=quote.change,
            change_percent=quote.change_percent,
        )


class PriceBarResponse(CamelModel):
    """A single chart bar."""

    time: str
    open: float
    high: float
    low: float
    close: float
    volume: int

    @classmethod
    def from_entity(cls, bar: PriceBar) -> "PriceBarResponse":
        return cls(
            time=bar.time,
            open=bar.open,
            high=bar.high,
            low=bar.low,
            close=bar.close,
            volume=bar.volume,
        )


class PositionResponse(CamelModel):
    """An open position; P/L keys keep their upper-case "PL"."""

    symbol: str
    qty: float
    market_value: float
    unrealized_pl: float = Field(..., alias="unrealizedPL")
    unrealized_pl_percent: float = Field(..., alias="unrealizedPLPercent")

    @classmethod
    def from_entity(cls, position: Position) -> "PositionResponse":
        return cls(
            symbol=position.symbol,
            qty=position.qty,
            market_value=position.market_value,
            unrealized_pl=position.unrealized_pl,
            unrealized_pl_percent=position.unrealized_pl_percent,
        )


class AccountResponse(CamelModel):
    cash: float
    portfolio_value: float
    buying_power: float

    @classmethod
    def from_entity(cls, account: Account) -> "AccountResponse":
        return cls(
            cash=account.cash,
            portfolio_value=account.portfolio_value,
            buying_power=account.buying_power,
        )


class TradeRequest(CamelModel):
    """Request schema for placing a paper trade.

    Attributes:
        qty: Number of shares, strictly positive.
        limit_price: Required when type is "limit".
    """

    symbol: str = Field(..., pattern=SYMBOL_PATTERN)
    qty: float = Field(..., gt=0)
    side: Literal["buy", "sell"]
    type: Literal["market", "limit"] = "market"
    time_in_force: Literal["day", "gtc"] = "day"
    limit_price: Optional[float] = Field(None, gt=0)


class OrderResponse(CamelModel):
    id: str
    symbol: str
    qty: float
    side: str
    type: str
    time_in_force: str
    limit_price: Optional[float] = None
    status: str
    submitted_at: Optional[str] = None

    @classmethod
    def from_entity(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            symbol=order.symbol,
            qty=order.qty,
            side=order.side,
            type=order.type,
            time_in_force=order.time_in_force,
            limit_price=order.limit_price,
            status=order.status,
            submitted_at=order.submitted_at,
        )


class StockResponse(CamelModel):
    symbol: str
    name: str
    description: str
    sector: str
    similar: list[str]

    @classmethod
    def from_entity(cls, stock: StockListing) -> "StockResponse":
        return cls(
            symbol=stock.symbol,
            name=stock.name,
            description=stock.description,
            sector=stock.sector,
            similar=list(stock.similar),
        )


class StockSearchResultResponse(StockResponse):
    """A catalog match with its similar stocks resolved."""

    similar_stocks: list[StockResponse]

    @classmethod
    def from_result(cls, result: StockSearchResult) -> "StockSearchResultResponse":
        stock = result.stock
        return cls(
            symbol=stock.symbol,
            name=stock.name,
            description=stock.description,
            sector=stock.sector,
            similar=list(stock.similar),
            similar_stocks=[StockResponse.from_entity(s) for s in result.similar_stocks],
        )


class NewsArticleResponse(CamelModel):
    title: str
    summary: str
    url: str
    source: str
    date: str

    @classmethod
    def from_entity(cls, article: NewsArticle) -> "NewsArticleResponse":
        return cls(
            title=article.title,
            summary=article.summary,
            url=article.url,
            source=article.source,
            date=article.date,
        )
