"""
Domain-specific errors for the advisor bounded context.

All of them surface as 500: the caller cannot fix an LLM failure.
No framework imports allowed.
"""

from app.domain.errors import UpstreamServiceError


class LLMNotConfiguredError(UpstreamServiceError):
    """Raised when no LLM API key is configured."""

    def __init__(self) -> None:
        super().__init__("AI service not configured")


class LLMRequestError(UpstreamServiceError):
    """Raised when the LLM endpoint is unreachable or returns an HTTP error."""

    def __init__(self, reason: str) -> None:
        super().__init__("AI request failed", reason)


class LLMResponseParseError(UpstreamServiceError):
    """Raised when the LLM returns empty content or content of the wrong shape."""

    def __init__(self, reason: str) -> None:
        super().__init__("AI response could not be parsed", reason)
