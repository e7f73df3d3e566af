"""
Use case: Structured trading guidance for a question.

Input: AdvisorQuestion (question, optional context)
Output: AdvisorGuidance (advice, risks, next steps)
Side effects: One LLM call in JSON mode.
Failure cases: LLMNotConfiguredError, LLMRequestError, LLMResponseParseError.
"""

import logging

from app.application.advisor.dtos import AdvisorQuestion
from app.domain.advisor.entities import AdvisorGuidance, ChatMessage, ChatRole
from app.domain.advisor.ports import LLMPort, PromptCatalog
from app.domain.advisor.responses import parse_advisor_guidance

logger = logging.getLogger(__name__)

NO_CONTEXT = "No additional context provided"


class AskAdvisorUseCase:
    def __init__(self, llm: LLMPort, prompts: PromptCatalog) -> None:
        self._llm = llm
        self._prompts = prompts

    def execute(self, query: AdvisorQuestion) -> AdvisorGuidance:
        logger.info("Advisor question received (context=%s)", bool(query.context))
        payload = self._llm.complete_json([
            ChatMessage(ChatRole.SYSTEM, self._prompts.system("advisor")),
            ChatMessage(
                ChatRole.USER,
                self._prompts.user(
                    "advisor",
                    question=query.question,
                    context=query.context or NO_CONTEXT,
                ),
            ),
        ])
        return parse_advisor_guidance(payload)
