"""
Use case: Beginner-friendly explanation of a financial term.

Input: term
Output: TermExplanation (term, definition, example)
Side effects: One LLM call in JSON mode.
Failure cases: LLMNotConfiguredError, LLMRequestError, LLMResponseParseError.
"""

import logging

from app.domain.advisor.entities import ChatMessage, ChatRole, TermExplanation
from app.domain.advisor.ports import LLMPort, PromptCatalog
from app.domain.advisor.responses import parse_term_explanation

logger = logging.getLogger(__name__)


class ExplainTermUseCase:
    def __init__(self, llm: LLMPort, prompts: PromptCatalog) -> None:
        self._llm = llm
        self._prompts = prompts

    def execute(self, term: str) -> TermExplanation:
        term = term.strip()
        logger.info("Requesting explanation for term=%r", term)
        payload = self._llm.complete_json([
            ChatMessage(ChatRole.SYSTEM, self._prompts.system("term_explanation")),
            ChatMessage(ChatRole.USER, self._prompts.user("term_explanation", term=term)),
        ])
        return parse_term_explanation(payload, term)
