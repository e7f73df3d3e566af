"""
Data Transfer Objects for the advisor application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ChatTurn:
    """A previous message in the conversation.

    Attributes:
        role: "user" or "assistant".
    """

    role: str
    content: str


@dataclass(frozen=True)
class ChatCommand:
    """Input DTO for the free-form chat."""

    message: str
    history: list[ChatTurn] = field(default_factory=list)


@dataclass(frozen=True)
class AdvisorQuestion:
    """Input DTO for the structured advisor."""

    question: str
    context: Optional[str] = None


@dataclass(frozen=True)
class GenerateLessonCommand:
    """Input DTO for generating and storing one lesson.

    Attributes:
        title: Lesson title; also the topic the model writes about.
        order: Curriculum position of the stored lesson.
    """

    title: str
    description: str
    difficulty: str
    order: int
    xp_reward: int = 100
