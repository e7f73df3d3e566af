"""
Use case: Scored AI outlook for a catalog stock.

Input: symbol
Output: StockOutlook (sentiment 0-100, risk 0-100, Buy/Sell/Hold, reason)
Side effects: One LLM call in JSON mode.
Failure cases: StockNotFoundError (symbol not in the catalog), LLM errors.
"""

import logging
from typing import Optional

from app.domain.advisor.entities import ChatMessage, ChatRole, StockOutlook
from app.domain.advisor.ports import LLMPort, PromptCatalog
from app.domain.advisor.responses import parse_stock_outlook
from app.domain.market.errors import StockNotFoundError
from app.domain.market.stock_catalog import StockCatalog

logger = logging.getLogger(__name__)


class AnalyzeStockUseCase:
    """Only catalog stocks can be analysed; the model gets the company name too."""

    def __init__(
        self,
        llm: LLMPort,
        prompts: PromptCatalog,
        catalog: Optional[StockCatalog] = None,
    ) -> None:
        self._llm = llm
        self._prompts = prompts
        self._catalog = catalog or StockCatalog()

    def execute(self, symbol: str) -> StockOutlook:
        stock = self._catalog.find(symbol)
        if stock is None:
            raise StockNotFoundError(symbol)

        logger.info("Requesting stock outlook for symbol=%s", stock.symbol)
        values = {"symbol": stock.symbol, "name": stock.name}
        payload = self._llm.complete_json([
            ChatMessage(ChatRole.SYSTEM, self._prompts.system("stock_analysis", **values)),
            ChatMessage(ChatRole.USER, self._prompts.user("stock_analysis", **values)),
        ])
        return parse_stock_outlook(payload, stock)
