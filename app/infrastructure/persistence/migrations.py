"""
Schema migration.

Creates every table that does not exist yet. Safe to run repeatedly.
"""

import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from app.infrastructure.persistence.models import Base

logger = logging.getLogger(__name__)


def migrate(engine: Engine) -> list[str]:
    """Create missing tables.

    Returns:
        Names of the tables created by this run.
    """
    existing = set(inspect(engine).get_table_names())
    Base.metadata.create_all(engine)
    created = sorted(set(Base.metadata.tables) - existing)
    if created:
        logger.info("Created tables: %s", ", ".join(created))
    else:
        logger.info("Schema up to date (%d tables)", len(existing))
    return created
