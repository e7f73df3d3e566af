"""
Pydantic schemas for advisor API request/response validation.
"""

from typing import Literal, Optional

from pydantic import Field

from app.domain.advisor.entities import (
    AdvisorGuidance,
    MarketAnalysis,
    MetricInsight,
    StockOutlook,
    TermExplanation,
)
from app.interfaces.schemas import CamelModel


class AnalyzeRequest(CamelModel):
    symbol: str = Field(..., min_length=1, max_length=10)


class ExplainRequest(CamelModel):
    term: str = Field(..., min_length=1, max_length=200)


class ChatTurnSchema(CamelModel):
    role: Literal["user", "assistant"]
    content: str = Field(..., max_length=4000)


class ChatRequest(CamelModel):
    """A chat message plus the prior conversation, oldest first."""

    message: str = Field(..., min_length=1, max_length=4000)
    history: list[ChatTurnSchema] = Field(default_factory=list, max_length=50)


class AdvisorRequest(CamelModel):
    question: str = Field(..., min_length=1, max_length=2000)
    context: Optional[str] = Field(None, max_length=4000)


class MetricInsightResponse(CamelModel):
    value: str
    explanation: str

    @classmethod
    def from_entity(cls, insight: MetricInsight) -> "MetricInsightResponse":
        return cls(value=insight.value, explanation=insight.explanation)


class MarketMetricsResponse(CamelModel):
    sentiment: MetricInsightResponse
    momentum: MetricInsightResponse
    risk: MetricInsightResponse


class MarketAnalysisResponse(CamelModel):
    summary: str
    metrics: MarketMetricsResponse

    @classmethod
    def from_entity(cls, analysis: MarketAnalysis) -> "MarketAnalysisResponse":
        return cls(
            summary=analysis.summary,
            metrics=MarketMetricsResponse(
                sentiment=MetricInsightResponse.from_entity(analysis.sentiment),
                momentum=MetricInsightResponse.from_entity(analysis.momentum),
                risk=MetricInsightResponse.from_entity(analysis.risk),
            ),
        )


class TermExplanationResponse(CamelModel):
    term: str
    definition: str
    example: str

    @classmethod
    def from_entity(cls, explanation: TermExplanation) -> "TermExplanationResponse":
        return cls(
            term=explanation.term,
            definition=explanation.definition,
            example=explanation.example,
        )


class ChatResponse(CamelModel):
    content: str


class AdvisorResponse(CamelModel):
    advice: list[str]
    risks: list[str]
    next_steps: list[str]

    @classmethod
    def from_entity(cls, guidance: AdvisorGuidance) -> "AdvisorResponse":
        return cls(
            advice=list(guidance.advice),
            risks=list(guidance.risks),
            next_steps=list(guidance.next_steps),
        )


class StockOutlookResponse(CamelModel):
    """LLM outlook for a catalog stock.

    Attributes:
        sentiment: 0 (very negative) to 100 (very positive).
        risk: 0 (low) to 100 (high).
    """

    symbol: str
    name: str
    sentiment: float
    risk: float
    recommendation: str
    reason: str

    @classmethod
    def from_entity(cls, outlook: StockOutlook) -> "StockOutlookResponse":
        return cls(
            symbol=outlook.symbol,
            name=outlook.name,
            sentiment=outlook.sentiment,
            risk=outlook.risk,
            recommendation=outlook.recommendation,
            reason=outlook.reason,
        )
