"""
Domain-specific errors for the market bounded context.

These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from app.domain.errors import NotFoundError, RuleViolationError, UpstreamServiceError


class BrokerageCredentialsMissingError(RuleViolationError):
    """Raised when neither the user nor the environment provides Alpaca keys."""

    def __init__(self) -> None:
        super().__init__("Alpaca API credentials not configured")


class InvalidOrderError(RuleViolationError):
    """Raised when an order request is inconsistent (e.g. limit without price)."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid order: {reason}")
        self.reason = reason


class UnknownTimeframeError(RuleViolationError):
    """Raised when a chart timeframe is not one of the supported values."""

    def __init__(self, timeframe: str) -> None:
        super().__init__(f"Unknown timeframe: {timeframe}")
        self.timeframe = timeframe


class StockNotFoundError(NotFoundError):
    """Raised when a symbol is not in the stock catalog."""

    def __init__(self, symbol: str) -> None:
        super().__init__("Stock not found")
        self.symbol = symbol


class MarketDataError(UpstreamServiceError):
    """Raised when quotes, bars, positions or account data cannot be fetched."""

    def __init__(self, what: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {what}", reason)
        self.what = what


class TradeExecutionError(UpstreamServiceError):
    """Raised when the brokerage rejects or fails to accept an order."""

    def __init__(self, reason: str) -> None:
        super().__init__("Failed to execute trade", reason)
