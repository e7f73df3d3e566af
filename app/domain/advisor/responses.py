"""
Domain service: turn raw LLM JSON payloads into advisor entities.

The model is asked for a fixed JSON shape, but nothing guarantees it
complies. Each parser checks the fields it needs and raises
LLMResponseParseError otherwise, so a malformed answer becomes a clean
500 instead of a KeyError.
"""

from typing import Any

from app.domain.advisor.entities import (
    AdvisorGuidance,
    ChatReply,
    MarketAnalysis,
    MetricInsight,
    StockOutlook,
    TermExplanation,
)
from app.domain.advisor.errors import LLMResponseParseError
from app.domain.market.entities import StockListing


def _text(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        raise LLMResponseParseError(f"missing field '{key}'")
    if isinstance(value, (dict, list)):
        raise LLMResponseParseError(f"field '{key}' is not text")
    return str(value)


def _text_list(payload: dict[str, Any], key: str) -> list[str]:
    value = payload.get(key, [])
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise LLMResponseParseError(f"field '{key}' is not a list")
    return [str(item) for item in value]


def _number(payload: dict[str, Any], key: str) -> float:
    value = payload.get(key)
    if isinstance(value, bool):
        raise LLMResponseParseError(f"field '{key}' is not a number")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise LLMResponseParseError(f"field '{key}' is not a number") from None


def _metric(metrics: dict[str, Any], key: str) -> MetricInsight:
    raw = metrics.get(key)
    if not isinstance(raw, dict):
        raise LLMResponseParseError(f"missing metric '{key}'")
    return MetricInsight(value=_text(raw, "value"), explanation=_text(raw, "explanation"))


def parse_market_analysis(payload: dict[str, Any]) -> MarketAnalysis:
    metrics = payload.get("metrics")
    if not isinstance(metrics, dict):
        raise LLMResponseParseError("missing field 'metrics'")
    return MarketAnalysis(
        summary=_text(payload, "summary"),
        sentiment=_metric(metrics, "sentiment"),
        momentum=_metric(metrics, "momentum"),
        risk=_metric(metrics, "risk"),
    )


def parse_term_explanation(payload: dict[str, Any], term: str) -> TermExplanation:
    """The model sometimes omits the term; fall back to the one asked for."""
    return TermExplanation(
        term=str(payload.get("term") or term),
        definition=_text(payload, "definition"),
        example=_text(payload, "example"),
    )


def parse_chat_reply(payload: dict[str, Any]) -> ChatReply:
    return ChatReply(content=_text(payload, "content"))


def parse_advisor_guidance(payload: dict[str, Any]) -> AdvisorGuidance:
    return AdvisorGuidance(
        advice=_text_list(payload, "advice"),
        risks=_text_list(payload, "risks"),
        next_steps=_text_list(payload, "nextSteps"),
    )


def parse_stock_outlook(payload: dict[str, Any], stock: StockListing) -> StockOutlook:
    return StockOutlook(
        symbol=stock.symbol,
        name=stock.name,
        sentiment=_number(payload, "sentiment"),
        risk=_number(payload, "risk"),
        recommendation=_text(payload, "recommendation"),
        reason=_text(payload, "reason"),
    )
