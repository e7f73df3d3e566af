"""
Dependency injection for the advisor bounded context.
"""

from fastapi import Depends

from app.application.advisor.analyze_market import AnalyzeMarketUseCase
from app.application.advisor.analyze_stock import AnalyzeStockUseCase
from app.application.advisor.ask_advisor import AskAdvisorUseCase
from app.application.advisor.chat import ChatUseCase
from app.application.advisor.explain_term import ExplainTermUseCase
from app.core.config import settings
from app.domain.advisor.ports import LLMPort, PromptCatalog
from app.infrastructure.advisor.openai_chat_adapter import OpenAIChatAdapter
from app.infrastructure.advisor.prompt_loader import get_prompt_loader


def get_llm_port() -> LLMPort:
    """Build the chat-completion adapter from settings.

    A missing API key is reported on first use, not here, so the rest
    of the API keeps working without one.
    """
    return OpenAIChatAdapter(
        api_key=settings.openai_api_key,
        base_url=settings.llm_base_url,
        model=settings.llm_model,
        temperature=settings.llm_temperature,
        timeout=settings.llm_timeout_seconds,
    )


def get_prompt_catalog() -> PromptCatalog:
    return get_prompt_loader()


def get_analyze_market_use_case(
    llm: LLMPort = Depends(get_llm_port),
    prompts: PromptCatalog = Depends(get_prompt_catalog),
) -> AnalyzeMarketUseCase:
    return AnalyzeMarketUseCase(llm, prompts)


def get_explain_term_use_case(
    llm: LLMPort = Depends(get_llm_port),
    prompts: PromptCatalog = Depends(get_prompt_catalog),
) -> ExplainTermUseCase:
    return ExplainTermUseCase(llm, prompts)


def get_chat_use_case(
    llm: LLMPort = Depends(get_llm_port),
    prompts: PromptCatalog = Depends(get_prompt_catalog),
) -> ChatUseCase:
    return ChatUseCase(llm, prompts)


def get_ask_advisor_use_case(
    llm: LLMPort = Depends(get_llm_port),
    prompts: PromptCatalog = Depends(get_prompt_catalog),
) -> AskAdvisorUseCase:
    return AskAdvisorUseCase(llm, prompts)


def get_analyze_stock_use_case(
    llm: LLMPort = Depends(get_llm_port),
    prompts: PromptCatalog = Depends(get_prompt_catalog),
) -> AnalyzeStockUseCase:
    return AnalyzeStockUseCase(llm, prompts)
