"""
Adapter: Alpaca brokerage REST API.

Implements the BrokeragePort over Alpaca's trading API (account,
positions, orders) and market data API (snapshots, bars).
Alpaca returns most numbers as strings; they are parsed to floats here
so nothing above this layer sees the wire format.

No retries: a failed call surfaces immediately as MarketDataError or
TradeExecutionError.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional

import requests

from app.domain.errors import UpstreamServiceError
from app.domain.market.entities import (
    Account,
    BrokerageCredentials,
    Order,
    OrderRequest,
    OrderType,
    Position,
    PriceBar,
    Quote,
)
from app.domain.market.errors import MarketDataError, TradeExecutionError
from app.domain.market.ports import BrokeragePort

logger = logging.getLogger(__name__)

BARS_PAGE_LIMIT = 10000


def _float(value: Any, default: float = 0.0) -> float:
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _rfc3339(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _error_reason(exc: requests.RequestException) -> str:
    """Prefer Alpaca's own message over the generic HTTP error text."""
    response = getattr(exc, "response", None)
    if response is not None:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return f"{response.status_code}: {body['message']}"
        return f"{response.status_code}: {response.reason}"
    return str(exc)


class AlpacaBrokerageAdapter(BrokeragePort):
    """requests-based client for one set of Alpaca credentials."""

    def __init__(
        self,
        credentials: BrokerageCredentials,
        base_url: str,
        data_url: str,
        feed: str = "iex",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._data_url = data_url.rstrip("/")
        self._feed = feed
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "APCA-API-KEY-ID": credentials.key_id,
                "APCA-API-SECRET-KEY": credentials.secret_key,
                "Accept": "application/json",
            }
        )

    # ── HTTP helper ──────────────────────────────────────────────────

    def _call(
        self,
        method: str,
        url: str,
        on_error: Callable[[str], UpstreamServiceError],
        **kwargs: Any,
    ) -> Any:
        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as exc:
            reason = _error_reason(exc)
            logger.error("Alpaca %s %s failed: %s", method, url, reason)
            raise on_error(reason) from exc
        except ValueError as exc:
            logger.error("Alpaca %s %s returned invalid JSON", method, url)
            raise on_error("invalid JSON in response") from exc

    # ── Market data ──────────────────────────────────────────────────

    def get_quote(self, symbol: str) -> Quote:
        snapshot = self._call(
            "GET",
            f"{self._data_url}/v2/stocks/{symbol}/snapshot",
            lambda reason: MarketDataError("market data", reason),
            params={"feed": self._feed},
        ) or {}

        latest_quote = snapshot.get("latestQuote") or {}
        latest_trade = snapshot.get("latestTrade") or {}
        daily_bar = snapshot.get("dailyBar") or {}
        prev_bar = snapshot.get("prevDailyBar") or {}

        # ask, else bid, else last trade
        price = (
            _float(latest_quote.get("ap"))
            or _float(latest_quote.get("bp"))
            or _float(latest_trade.get("p"))
        )
        prev_close = _float(prev_bar.get("c"))
        change = price - prev_close if prev_close and price else 0.0
        change_percent = change / prev_close * 100 if prev_close and price else 0.0

        return Quote(
            symbol=symbol,
            price=price,
            timestamp=latest_quote.get("t") or latest_trade.get("t"),
            volume=int(_float(daily_bar.get("v"))),
            change=round(change, 4),
            change_percent=round(change_percent, 4),
        )

    def get_bars(
        self, symbol: str, bar_size: str, start: datetime, end: datetime
    ) -> list[PriceBar]:
        params: dict[str, Any] = {
            "timeframe": bar_size,
            "start": _rfc3339(start),
            "end": _rfc3339(end),
            "feed": self._feed,
            "limit": BARS_PAGE_LIMIT,
            "adjustment": "raw",
        }
        bars: list[PriceBar] = []
        while True:
            page = self._call(
                "GET",
                f"{self._data_url}/v2/stocks/{symbol}/bars",
                lambda reason: MarketDataError("market data", reason),
                params=params,
            ) or {}
            for raw in page.get("bars") or []:
                bars.append(
                    PriceBar(
                        time=raw.get("t", ""),
                        open=_float(raw.get("o")),
                        high=_float(raw.get("h")),
                        low=_float(raw.get("l")),
                        close=_float(raw.get("c")),
                        volume=int(_float(raw.get("v"))),
                    )
                )
            token = page.get("next_page_token")
            if not token:
                break
            params["page_token"] = token

        logger.debug("Fetched %d %s bars for %s", len(bars), bar_size, symbol)
        return bars

    # ── Trading ──────────────────────────────────────────────────────

    def get_positions(self) -> list[Position]:
        raw_positions = self._call(
            "GET",
            f"{self._base_url}/v2/positions",
            lambda reason: MarketDataError("positions", reason),
        ) or []
        return [
            Position(
                symbol=raw["symbol"],
                qty=_float(raw.get("qty")),
                market_value=_float(raw.get("market_value")),
                unrealized_pl=_float(raw.get("unrealized_pl")),
                unrealized_pl_percent=_float(raw.get("unrealized_plpc")),
            )
            for raw in raw_positions
        ]

    def get_account(self) -> Account:
        raw = self._call(
            "GET",
            f"{self._base_url}/v2/account",
            lambda reason: MarketDataError("account data", reason),
        ) or {}
        return Account(
            cash=_float(raw.get("cash")),
            portfolio_value=_float(raw.get("portfolio_value")),
            buying_power=_float(raw.get("buying_power")),
        )

    def submit_order(self, order: OrderRequest) -> Order:
        payload: dict[str, Any] = {
            "symbol": order.symbol,
            "qty": str(order.qty),
            "side": order.side.value,
            "type": order.type.value,
            "time_in_force": order.time_in_force.value,
        }
        if order.type is OrderType.LIMIT:
            payload["limit_price"] = str(order.limit_price)

        raw = self._call(
            "POST",
            f"{self._base_url}/v2/orders",
            TradeExecutionError,
            json=payload,
        ) or {}
        limit_price = raw.get("limit_price")
        return Order(
            id=str(raw.get("id", "")),
            symbol=raw.get("symbol", order.symbol),
            qty=_float(raw.get("qty"), order.qty),
            side=raw.get("side", order.side.value),
            type=raw.get("type", order.type.value),
            time_in_force=raw.get("time_in_force", order.time_in_force.value),
            status=raw.get("status", "unknown"),
            limit_price=_float(limit_price) if limit_price is not None else None,
            submitted_at=raw.get("submitted_at"),
        )
