"""
FastAPI router for the advisor bounded context.

Every route here costs an LLM call, so all of them carry the heavy
rate limit. Routes delegate to use cases; parse and upstream failures
are mapped by the centralized error handlers.
"""

from fastapi import APIRouter, Depends, Path, Request

from app.application.advisor.analyze_market import AnalyzeMarketUseCase
from app.application.advisor.analyze_stock import AnalyzeStockUseCase
from app.application.advisor.ask_advisor import AskAdvisorUseCase
from app.application.advisor.chat import ChatUseCase
from app.application.advisor.dtos import AdvisorQuestion, ChatCommand, ChatTurn
from app.application.advisor.explain_term import ExplainTermUseCase
from app.interfaces.advisor.dependencies import (
    get_analyze_market_use_case,
    get_analyze_stock_use_case,
    get_ask_advisor_use_case,
    get_chat_use_case,
    get_explain_term_use_case,
)
from app.interfaces.advisor.schemas import (
    AdvisorRequest,
    AdvisorResponse,
    AnalyzeRequest,
    ChatRequest,
    ChatResponse,
    ExplainRequest,
    MarketAnalysisResponse,
    StockOutlookResponse,
    TermExplanationResponse,
)
from app.interfaces.schemas import ErrorResponse
from app.shared.security.rate_limiting import HEAVY_RATE_LIMIT, limiter

router = APIRouter(tags=["advisor"])

_LLM_ERRORS = {
    400: {"model": ErrorResponse},
    429: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "/ai/analyze",
    response_model=MarketAnalysisResponse,
    responses=_LLM_ERRORS,
    summary="Market commentary for a symbol",
)
@limiter.limit(HEAVY_RATE_LIMIT)
def analyze(
    request: Request,
    body: AnalyzeRequest,
    use_case: AnalyzeMarketUseCase = Depends(get_analyze_market_use_case),
) -> MarketAnalysisResponse:
    return MarketAnalysisResponse.from_entity(use_case.execute(body.symbol))


@router.post(
    "/ai/explain",
    response_model=TermExplanationResponse,
    responses=_LLM_ERRORS,
    summary="Explain a trading term",
)
@limiter.limit(HEAVY_RATE_LIMIT)
def explain(
    request: Request,
    body: ExplainRequest,
    use_case: ExplainTermUseCase = Depends(get_explain_term_use_case),
) -> TermExplanationResponse:
    return TermExplanationResponse.from_entity(use_case.execute(body.term))


@router.post(
    "/ai/chat",
    response_model=ChatResponse,
    responses=_LLM_ERRORS,
    summary="Educational chat",
)
@limiter.limit(HEAVY_RATE_LIMIT)
def chat(
    request: Request,
    body: ChatRequest,
    use_case: ChatUseCase = Depends(get_chat_use_case),
) -> ChatResponse:
    reply = use_case.execute(
        ChatCommand(
            message=body.message,
            history=[ChatTurn(role=turn.role, content=turn.content) for turn in body.history],
        )
    )
    return ChatResponse(content=reply.content)


@router.post(
    "/ai/advisor",
    response_model=AdvisorResponse,
    responses=_LLM_ERRORS,
    summary="Structured trading guidance",
)
@limiter.limit(HEAVY_RATE_LIMIT)
def advisor(
    request: Request,
    body: AdvisorRequest,
    use_case: AskAdvisorUseCase = Depends(get_ask_advisor_use_case),
) -> AdvisorResponse:
    guidance = use_case.execute(AdvisorQuestion(question=body.question, context=body.context))
    return AdvisorResponse.from_entity(guidance)


@router.get(
    "/stocks/analyze/{symbol}",
    response_model=StockOutlookResponse,
    responses={**_LLM_ERRORS, 404: {"model": ErrorResponse}},
    summary="Sentiment and risk outlook for a catalog stock",
)
@limiter.limit(HEAVY_RATE_LIMIT)
def analyze_stock(
    request: Request,
    symbol: str = Path(..., min_length=1, max_length=10),
    use_case: AnalyzeStockUseCase = Depends(get_analyze_stock_use_case),
) -> StockOutlookResponse:
    return StockOutlookResponse.from_entity(use_case.execute(symbol))
