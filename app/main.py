"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Session cookie, security headers and rate limiting
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from app.core.config import settings
from app.interfaces.advisor.router import router as advisor_router
from app.interfaces.health import router as health_router
from app.interfaces.identity.router import router as identity_router
from app.interfaces.learning.router import router as learning_router
from app.interfaces.market.router import router as market_router
from app.interfaces.social.router import router as social_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import RequestLoggingMiddleware, configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import limiter


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter

    # --- Middleware (last added runs first) ---
    app.add_middleware(SecurityHeadersMiddleware, path_prefix=settings.api_prefix)
    app.add_middleware(RequestLoggingMiddleware, path_prefix=settings.api_prefix)
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie="marketmentor_session",
        max_age=settings.session_max_age_seconds,
        same_site="lax",
        https_only=settings.session_https_only,
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    for router in (
        health_router,
        identity_router,
        market_router,
        advisor_router,
        social_router,
        learning_router,
    ):
        app.include_router(router, prefix=settings.api_prefix)

    return app


app = create_app()
