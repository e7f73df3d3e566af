"""
FastAPI router for the market bounded context.

Brokerage proxy (quotes, history, positions, account, trades), stock
catalog search and latest news. Brokerage routes need a session.
All routes delegate to use cases. No business logic here.
"""

from fastapi import APIRouter, Depends, Path, Query

from app.application.market.dtos import GetPriceHistoryQuery, PlaceOrderCommand
from app.application.market.get_account import GetAccountUseCase
from app.application.market.get_latest_news import GetLatestNewsUseCase
from app.application.market.get_positions import GetPositionsUseCase
from app.application.market.get_price_history import GetPriceHistoryUseCase
from app.application.market.get_quote import GetQuoteUseCase
from app.application.market.place_order import PlaceOrderUseCase
from app.application.market.search_stocks import SearchStocksUseCase
from app.domain.market.ports import BrokeragePort, NewsPort
from app.interfaces.market.dependencies import get_brokerage_port, get_news_port
from app.interfaces.market.schemas import (
    SYMBOL_PATTERN,
    AccountResponse,
    NewsArticleResponse,
    OrderResponse,
    PositionResponse,
    PriceBarResponse,
    QuoteResponse,
    StockSearchResultResponse,
    TradeRequest,
)
from app.interfaces.schemas import ErrorResponse

router = APIRouter(tags=["market"])

_BROKERAGE_ERRORS = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get(
    "/market/quotes/{symbol}",
    response_model=QuoteResponse,
    responses=_BROKERAGE_ERRORS,
    summary="Latest quote",
)
def get_quote(
    symbol: str = Path(..., pattern=SYMBOL_PATTERN),
    brokerage: BrokeragePort = Depends(get_brokerage_port),
) -> QuoteResponse:
    return QuoteResponse.from_entity(GetQuoteUseCase(brokerage).execute(symbol))


@router.get(
    "/market/history/{symbol}",
    response_model=list[PriceBarResponse],
    responses=_BROKERAGE_ERRORS,
    summary="Chart history",
    description="OHLCV bars for one of the timeframes 1D, 1W, 1M, 3M, YTD, 1Y.",
)
def get_history(
    symbol: str = Path(..., pattern=SYMBOL_PATTERN),
    timeframe: str = Query("1D", max_length=3),
    brokerage: BrokeragePort = Depends(get_brokerage_port),
) -> list[PriceBarResponse]:
    bars = GetPriceHistoryUseCase(brokerage).execute(
        GetPriceHistoryQuery(symbol=symbol, timeframe=timeframe)
    )
    return [PriceBarResponse.from_entity(bar) for bar in bars]


@router.get(
    "/positions",
    response_model=list[PositionResponse],
    responses=_BROKERAGE_ERRORS,
    summary="Open positions",
)
def get_positions(
    brokerage: BrokeragePort = Depends(get_brokerage_port),
) -> list[PositionResponse]:
    return [PositionResponse.from_entity(p) for p in GetPositionsUseCase(brokerage).execute()]


@router.get(
    "/account",
    response_model=AccountResponse,
    responses=_BROKERAGE_ERRORS,
    summary="Account balances",
)
def get_account(
    brokerage: BrokeragePort = Depends(get_brokerage_port),
) -> AccountResponse:
    return AccountResponse.from_entity(GetAccountUseCase(brokerage).execute())


@router.post(
    "/trade",
    response_model=OrderResponse,
    responses=_BROKERAGE_ERRORS,
    summary="Place a paper trade",
)
def place_trade(
    body: TradeRequest,
    brokerage: BrokeragePort = Depends(get_brokerage_port),
) -> OrderResponse:
    order = PlaceOrderUseCase(brokerage).execute(
        PlaceOrderCommand(
            symbol=body.symbol,
            qty=body.qty,
            side=body.side,
            type=body.type,
            time_in_force=body.time_in_force,
            limit_price=body.limit_price,
        )
    )
    return OrderResponse.from_entity(order)


@router.get(
    "/stocks/search",
    response_model=list[StockSearchResultResponse],
    summary="Search the stock catalog",
    description="Case-insensitive substring search; queries under 2 characters return [].",
)
def search_stocks(q: str = Query("", max_length=100)) -> list[StockSearchResultResponse]:
    return [StockSearchResultResponse.from_result(r) for r in SearchStocksUseCase().execute(q)]


@router.get(
    "/news/latest",
    response_model=list[NewsArticleResponse],
    summary="Latest market news",
)
def latest_news(news: NewsPort = Depends(get_news_port)) -> list[NewsArticleResponse]:
    return [NewsArticleResponse.from_entity(a) for a in GetLatestNewsUseCase(news).execute()]
