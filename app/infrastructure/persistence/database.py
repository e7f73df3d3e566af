"""
Engine and session factory.

The engine is built lazily from settings on first use so that importing
the application never opens a connection (and never needs a Postgres
driver when a test swaps in SQLite).
"""

import logging
from functools import lru_cache
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(url: str) -> Engine:
    """Create an engine for `url`.

    In-memory SQLite gets a single shared connection so every session
    sees the same database.
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    # expire_on_commit=False: rows are mapped to entities after the commit
    return sessionmaker(bind=engine, expire_on_commit=False)


@lru_cache(maxsize=1)
def get_engine(url: Optional[str] = None) -> Engine:
    """Return the process-wide engine built from settings."""
    url = url or settings.get_database_url()
    logger.info("Creating database engine for %s", url.split("@")[-1])
    return build_engine(url)


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker[Session]:
    """Return the process-wide session factory."""
    return build_session_factory(get_engine())
