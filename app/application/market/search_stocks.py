"""
Use case: Search the stock catalog.

Input: free-text query
Output: list[StockSearchResult] (at most 5)
Side effects: None.
Failure cases: None; short queries return an empty list.
"""

from typing import Optional

from app.domain.market.entities import StockSearchResult
from app.domain.market.stock_catalog import StockCatalog


class SearchStocksUseCase:
    def __init__(self, catalog: Optional[StockCatalog] = None) -> None:
        self._catalog = catalog or StockCatalog()

    def execute(self, query: str) -> list[StockSearchResult]:
        return self._catalog.search(query)
