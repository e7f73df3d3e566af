"""
Domain entities for the advisor bounded context.

Structured answers produced by the language model. Each entity is
built from the model's JSON payload by `app.domain.advisor.responses`.
"""

from dataclasses import dataclass, field
from enum import Enum


class ChatRole(Enum):
    """Speaker of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatMessage:
    """One message of a chat-completion conversation."""

    role: ChatRole
    content: str

    def as_payload(self) -> dict[str, str]:
        return {"role": self.role.value, "content": self.content}


@dataclass(frozen=True)
class MetricInsight:
    """A qualitative metric value with its explanation."""

    value: str
    explanation: str


@dataclass(frozen=True)
class MarketAnalysis:
    """Short commentary on a symbol: summary plus sentiment/momentum/risk."""

    summary: str
    sentiment: MetricInsight
    momentum: MetricInsight
    risk: MetricInsight


@dataclass(frozen=True)
class TermExplanation:
    """Beginner-friendly definition of a financial term."""

    term: str
    definition: str
    example: str


@dataclass(frozen=True)
class ChatReply:
    """Assistant answer in the free-form chat."""

    content: str


@dataclass(frozen=True)
class AdvisorGuidance:
    """Structured guidance for a trading question."""

    advice: list[str] = field(default_factory=list)
    risks: list[str] = field(default_factory=list)
    next_steps: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class StockOutlook:
    """Scored outlook for a catalog stock.

    Attributes:
        sentiment: 0 (very negative) to 100 (very positive).
        risk: 0 (low) to 100 (high).
        recommendation: One of Buy, Sell, Hold.
    """

    symbol: str
    name: str
    sentiment: float
    risk: float
    recommendation: str
    reason: str
