"""
Tests for parsing LLM payloads into advisor entities.
"""

import pytest

from app.domain.advisor.errors import LLMResponseParseError
from app.domain.advisor.responses import (
    parse_advisor_guidance,
    parse_chat_reply,
    parse_market_analysis,
    parse_stock_outlook,
    parse_term_explanation,
)
from app.domain.market.stock_catalog import StockCatalog

METRIC = {"value": "Positive", "explanation": "Strong earnings"}


class TestParseMarketAnalysis:
    """Tests for parse_market_analysis."""

    def test_valid_payload(self) -> None:
        """Summary and the three metrics are extracted."""
        analysis = parse_market_analysis(
            {
                "summary": "Solid quarter.",
                "metrics": {"sentiment": METRIC, "momentum": METRIC, "risk": METRIC},
            }
        )
        assert analysis.summary == "Solid quarter."
        assert analysis.risk.value == "Positive"

    def test_missing_metric_raises(self) -> None:
        """A missing metric is a parse error, not a KeyError."""
        with pytest.raises(LLMResponseParseError):
            parse_market_analysis(
                {"summary": "x", "metrics": {"sentiment": METRIC, "momentum": METRIC}}
            )

    def test_missing_metrics_object_raises(self) -> None:
        with pytest.raises(LLMResponseParseError):
            parse_market_analysis({"summary": "x"})


class TestParseOtherPayloads:
    """Tests for the remaining parsers."""

    def test_term_falls_back_to_requested_term(self) -> None:
        """When the model omits "term", the requested term is used."""
        explanation = parse_term_explanation(
            {"definition": "A rising market", "example": "2021"}, "Bull Market"
        )
        assert explanation.term == "Bull Market"

    def test_chat_requires_content(self) -> None:
        """A reply without content is rejected."""
        assert parse_chat_reply({"content": "Hi"}).content == "Hi"
        with pytest.raises(LLMResponseParseError):
            parse_chat_reply({})

    def test_advisor_reads_next_steps(self) -> None:
        """nextSteps maps to next_steps; a bare string becomes a one-item list."""
        guidance = parse_advisor_guidance(
            {"advice": ["Diversify"], "risks": "Volatility", "nextSteps": ["Read a lesson"]}
        )
        assert guidance.risks == ["Volatility"]
        assert guidance.next_steps == ["Read a lesson"]

    def test_stock_outlook_uses_catalog_identity(self) -> None:
        """Symbol and name come from the catalog, scores from the payload."""
        stock = StockCatalog().find("AAPL")
        outlook = parse_stock_outlook(
            {"sentiment": "72", "risk": 40, "recommendation": "Hold", "reason": "Fair value"},
            stock,
        )
        assert outlook.symbol == "AAPL"
        assert outlook.name == "Apple Inc."
        assert outlook.sentiment == 72.0

    def test_stock_outlook_rejects_non_numeric_score(self) -> None:
        stock = StockCatalog().find("AAPL")
        with pytest.raises(LLMResponseParseError):
            parse_stock_outlook(
                {"sentiment": "high", "risk": 40, "recommendation": "Hold", "reason": "x"},
                stock,
            )
