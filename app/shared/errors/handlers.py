"""
Centralized error handlers for FastAPI.

Maps domain error categories to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the {"error": ..., "detail": ...} envelope.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from app.domain.errors import (
    AuthenticationError,
    DomainError,
    NotFoundError,
    RuleViolationError,
    UpstreamServiceError,
)
from app.shared.security.rate_limiting import rate_limit_exceeded_handler

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_401 = 401
HTTP_404 = 404
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def _summarize_validation(exc: RequestValidationError) -> str:
    """Render the first validation problem as `field: message`."""
    errors = exc.errors()
    if not errors:
        return ""
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request bodies, paths and query strings."""
        detail = _summarize_validation(exc)
        logger.info("Request validation failed: %s", detail)
        return _error_response(HTTP_400, "Invalid request", detail)

    @app.exception_handler(RuleViolationError)
    async def handle_rule_violation(
        _request: Request, exc: RuleViolationError
    ) -> JSONResponse:
        """Handle business rule violations."""
        logger.info("Rule violation: %s", exc.message)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(AuthenticationError)
    async def handle_authentication(
        _request: Request, exc: AuthenticationError
    ) -> JSONResponse:
        """Handle missing or invalid sessions."""
        logger.info("Authentication required: %s", exc.message)
        return _error_response(HTTP_401, exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(
        _request: Request, exc: NotFoundError
    ) -> JSONResponse:
        """Handle missing resources."""
        logger.warning("Not found: %s", exc.message)
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(UpstreamServiceError)
    async def handle_upstream(
        _request: Request, exc: UpstreamServiceError
    ) -> JSONResponse:
        """Handle brokerage and LLM failures. The upstream reason is surfaced as detail."""
        logger.error("Upstream failure: %s (%s)", exc.message, exc.reason)
        return _error_response(HTTP_500, exc.message, exc.reason or None)

    @app.exception_handler(DomainError)
    async def handle_domain(
        _request: Request, exc: DomainError
    ) -> JSONResponse:
        """Catch-all for unhandled domain errors."""
        logger.error("Unhandled domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")

    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
