"""
Port interfaces (ABCs) for the advisor bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from app.domain.advisor.entities import ChatMessage


class LLMPort(ABC):
    """Port for an OpenAI-compatible chat-completion model."""

    @abstractmethod
    def complete(
        self,
        messages: list[ChatMessage],
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        """Return the assistant's text reply.

        Raises:
            LLMNotConfiguredError: If no API key is configured.
            LLMRequestError: If the HTTP call fails.
            LLMResponseParseError: If the reply has no content.
        """
        raise NotImplementedError

    @abstractmethod
    def complete_json(self, messages: list[ChatMessage]) -> dict[str, Any]:
        """Return the assistant's reply parsed as a JSON object (JSON mode).

        Raises:
            LLMNotConfiguredError: If no API key is configured.
            LLMRequestError: If the HTTP call fails.
            LLMResponseParseError: If the reply is empty or not a JSON object.
        """
        raise NotImplementedError


class PromptCatalog(ABC):
    """Port for named system/user prompt templates."""

    @abstractmethod
    def system(self, name: str, /, **values: Any) -> str:
        """Return the rendered system prompt for `name`."""
        raise NotImplementedError

    @abstractmethod
    def user(self, name: str, /, **values: Any) -> str:
        """Return the rendered user prompt for `name`."""
        raise NotImplementedError
