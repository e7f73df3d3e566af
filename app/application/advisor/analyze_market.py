"""
Use case: Short AI commentary on a symbol.

Input: symbol
Output: MarketAnalysis (summary + sentiment/momentum/risk metrics)
Side effects: One LLM call in JSON mode.
Failure cases: LLMNotConfiguredError, LLMRequestError, LLMResponseParseError.
"""

import logging

from app.domain.advisor.entities import ChatMessage, ChatRole, MarketAnalysis
from app.domain.advisor.ports import LLMPort, PromptCatalog
from app.domain.advisor.responses import parse_market_analysis

logger = logging.getLogger(__name__)


class AnalyzeMarketUseCase:
    def __init__(self, llm: LLMPort, prompts: PromptCatalog) -> None:
        self._llm = llm
        self._prompts = prompts

    def execute(self, symbol: str) -> MarketAnalysis:
        symbol = symbol.upper()
        logger.info("Requesting market analysis for symbol=%s", symbol)
        payload = self._llm.complete_json([
            ChatMessage(ChatRole.SYSTEM, self._prompts.system("market_analysis", symbol=symbol)),
            ChatMessage(ChatRole.USER, self._prompts.user("market_analysis", symbol=symbol)),
        ])
        return parse_market_analysis(payload)
