"""
Domain service: stock catalog search.

Pure business logic that matches a free-text query against a fixed
catalog of listed stocks. No IO, no frameworks.

Matching is case-insensitive substring containment on symbol, name,
description and sector. Results are ordered by a simple relevance rule
(exact symbol, exact name, partial symbol, then catalog order).
"""

from __future__ import annotations

from typing import Iterable, Optional

from app.domain.market.entities import StockListing, StockSearchResult

MIN_QUERY_LENGTH = 2
MAX_RESULTS = 5


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------
# "similar" may reference symbols that are not in the catalog (SNAP, TSM…);
# those are dropped when results are enriched.

STOCK_CATALOG: tuple[StockListing, ...] = (
    StockListing(
        symbol="AAPL",
        name="Apple Inc.",
        description="Consumer electronics and software company",
        sector="Technology",
        similar=("MSFT", "GOOGL", "META"),
    ),
    StockListing(
        symbol="MSFT",
        name="Microsoft Corporation",
        description="Software and cloud computing company",
        sector="Technology",
        similar=("AAPL", "GOOGL", "META"),
    ),
    StockListing(
        symbol="GOOGL",
        name="Alphabet Inc.",
        description="Internet services and AI technology company",
        sector="Technology",
        similar=("META", "MSFT", "AMZN"),
    ),
    StockListing(
        symbol="META",
        name="Meta Platforms Inc.",
        description="Social media and virtual reality company",
        sector="Technology",
        similar=("SNAP", "GOOGL", "TWTR"),
    ),
    StockListing(
        symbol="NVDA",
        name="NVIDIA Corporation",
        description="Graphics and AI computing company",
        sector="Technology",
        similar=("AMD", "INTC", "TSM"),
    ),
    StockListing(
        symbol="AMZN",
        name="Amazon.com Inc.",
        description="E-commerce and cloud computing company",
        sector="Consumer Cyclical",
        similar=("BABA", "WMT", "TGT"),
    ),
    StockListing(
        symbol="TSLA",
        name="Tesla Inc.",
        description="Electric vehicles and clean energy company",
        sector="Automotive",
        similar=("F", "GM", "NIO"),
    ),
    StockListing(
        symbol="AMD",
        name="Advanced Micro Devices Inc.",
        description="Semiconductor company",
        sector="Technology",
        similar=("NVDA", "INTC", "TSM"),
    ),
    StockListing(
        symbol="INTC",
        name="Intel Corporation",
        description="Semiconductor chip manufacturer",
        sector="Technology",
        similar=("AMD", "NVDA", "TSM"),
    ),
    StockListing(
        symbol="F",
        name="Ford Motor Company",
        description="Automotive manufacturer",
        sector="Automotive",
        similar=("GM", "TSLA", "TM"),
    ),
)


class StockCatalog:
    """Searchable, read-only stock catalog."""

    def __init__(self, listings: Iterable[StockListing] = STOCK_CATALOG) -> None:
        self._listings = tuple(listings)
        self._by_symbol = {listing.symbol: listing for listing in self._listings}

    def find(self, symbol: str) -> Optional[StockListing]:
        """Return the listing for a symbol (case-insensitive), or None."""
        return self._by_symbol.get(symbol.upper())

    def search(self, query: str, limit: int = MAX_RESULTS) -> list[StockSearchResult]:
        """Return up to `limit` listings matching the query, most relevant first.

        Surrounding whitespace is trimmed first; queries left shorter than
        two characters return no results.
        """
        needle = query.strip().lower()
        if len(needle) < MIN_QUERY_LENGTH:
            return []

        matches = [
            listing for listing in self._listings if _matches(listing, needle)
        ]
        # sorted() is stable, so ties keep catalog order
        ranked = sorted(matches, key=lambda listing: _relevance(listing, needle))

        return [
            StockSearchResult(
                stock=listing,
                similar_stocks=[
                    self._by_symbol[symbol]
                    for symbol in listing.similar
                    if symbol in self._by_symbol
                ],
            )
            for listing in ranked[:limit]
        ]


def _matches(listing: StockListing, needle: str) -> bool:
    return any(
        needle in text.lower()
        for text in (listing.symbol, listing.name, listing.description, listing.sector)
    )


def _relevance(listing: StockListing, needle: str) -> int:
    """Lower is more relevant."""
    symbol = listing.symbol.lower()
    if symbol == needle:
        return 0
    if listing.name.lower() == needle:
        return 1
    if needle in symbol:
        return 2
    return 3
