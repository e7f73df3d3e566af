"""
Tests for the market domain layer.

Stock catalog search, timeframe resolution and error messages.
No external dependencies or IO required.
"""

from datetime import datetime, timedelta, timezone

import pytest

from app.domain.market.errors import (
    InvalidOrderError,
    MarketDataError,
    StockNotFoundError,
    UnknownTimeframeError,
)
from app.domain.market.stock_catalog import StockCatalog
from app.domain.market.timeframes import Timeframe, bar_window, parse_timeframe

NOW = datetime(2024, 6, 15, 14, 30, tzinfo=timezone.utc)


class TestStockCatalogSearch:
    """Tests for StockCatalog.search."""

    catalog = StockCatalog()

    @pytest.mark.parametrize("query", ["", " ", "a", " A "])
    def test_short_queries_return_nothing(self, query: str) -> None:
        """Queries under two characters (after trimming) return []."""
        assert self.catalog.search(query) == []

    def test_exact_symbol_ranks_first(self) -> None:
        """An exact symbol match outranks partial matches."""
        results = self.catalog.search("amd")
        assert results[0].stock.symbol == "AMD"

    def test_matches_sector_and_description(self) -> None:
        """Sector text matches too; results are capped at five."""
        results = self.catalog.search("technology")
        assert 0 < len(results) <= 5
        assert all(r.stock.sector == "Technology" for r in results)

    def test_case_insensitive(self) -> None:
        """Matching ignores case."""
        assert [r.stock.symbol for r in self.catalog.search("TESLA")] == ["TSLA"]

    def test_similar_stocks_resolved_and_unknown_dropped(self) -> None:
        """Similar symbols outside the catalog (SNAP, TWTR) are dropped."""
        meta = next(r for r in self.catalog.search("meta") if r.stock.symbol == "META")
        assert [s.symbol for s in meta.similar_stocks] == ["GOOGL"]

    def test_no_match(self) -> None:
        """Unknown text returns an empty list."""
        assert self.catalog.search("zzzz") == []

    def test_find_is_case_insensitive(self) -> None:
        """find() upper-cases the symbol."""
        assert self.catalog.find("nvda").name == "NVIDIA Corporation"
        assert self.catalog.find("XYZ") is None


class TestTimeframes:
    """Tests for chart timeframe resolution."""

    def test_parse_is_case_insensitive(self) -> None:
        """'ytd' parses to YEAR_TO_DATE."""
        assert parse_timeframe("ytd") is Timeframe.YEAR_TO_DATE

    def test_unknown_timeframe_raises(self) -> None:
        """Unsupported values raise UnknownTimeframeError."""
        with pytest.raises(UnknownTimeframeError, match="5Y"):
            parse_timeframe("5Y")

    @pytest.mark.parametrize(
        "timeframe,bar_size,lookback",
        [
            (Timeframe.ONE_DAY, "5Min", timedelta(days=1)),
            (Timeframe.ONE_WEEK, "1Hour", timedelta(days=7)),
            (Timeframe.ONE_MONTH, "1Day", timedelta(days=30)),
            (Timeframe.THREE_MONTHS, "1Day", timedelta(days=90)),
            (Timeframe.ONE_YEAR, "1Day", timedelta(days=365)),
        ],
    )
    def test_rolling_windows(
        self, timeframe: Timeframe, bar_size: str, lookback: timedelta
    ) -> None:
        """Rolling timeframes end now and start `lookback` earlier."""
        window = bar_window(timeframe, NOW)
        assert window.bar_size == bar_size
        assert window.end == NOW
        assert window.start == NOW - lookback

    def test_year_to_date_starts_january_first(self) -> None:
        """YTD starts at midnight on January 1st of the current year."""
        window = bar_window(Timeframe.YEAR_TO_DATE, NOW)
        assert window.start == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert window.bar_size == "1Day"


class TestMarketErrors:
    """Tests for market error messages."""

    def test_market_data_error_keeps_reason(self) -> None:
        """The message names what failed; the upstream reason is kept apart."""
        error = MarketDataError("positions", "403: forbidden")
        assert error.message == "Failed to fetch positions"
        assert error.reason == "403: forbidden"

    def test_invalid_order_message(self) -> None:
        assert InvalidOrderError("qty must be positive").message == "Invalid order: qty must be positive"

    def test_stock_not_found_message(self) -> None:
        assert StockNotFoundError("XYZ").message == "Stock not found"
