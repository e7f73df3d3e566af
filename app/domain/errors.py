"""
Base domain errors shared by every bounded context.

Each context defines its own specific errors in its `errors` module,
deriving from one of the categories below. The interface layer maps
categories (not individual errors) to HTTP status codes.
No framework imports allowed.
"""


class DomainError(Exception):
    """Base error for all domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class RuleViolationError(DomainError):
    """Raised when a request breaks a business rule or fails validation."""


class AuthenticationError(DomainError):
    """Raised when the caller is not (or no longer) authenticated."""


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""


class UpstreamServiceError(DomainError):
    """Raised when an external collaborator (brokerage, LLM) fails.

    Attributes:
        reason: The upstream failure message, safe to echo as detail.
    """

    def __init__(self, message: str, reason: str = "") -> None:
        super().__init__(message)
        self.reason = reason
