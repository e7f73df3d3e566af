"""
Dependency injection for the market bounded context.

The brokerage adapter is built per request for the caller: their own
Alpaca keys when stored on the profile, otherwise the keys from the
environment.
"""

import logging

from fastapi import Depends
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings
from app.domain.market.entities import BrokerageCredentials
from app.domain.market.errors import BrokerageCredentialsMissingError
from app.domain.market.ports import BrokeragePort, NewsPort
from app.infrastructure.identity.user_repository import UserRepositoryAdapter
from app.infrastructure.market.alpaca_adapter import AlpacaBrokerageAdapter
from app.infrastructure.market.static_news_adapter import StaticNewsAdapter
from app.interfaces.dependencies import get_current_user_id, get_session_factory

logger = logging.getLogger(__name__)


def get_brokerage_port(
    user_id: int = Depends(get_current_user_id),
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> BrokeragePort:
    """Build an Alpaca adapter for the caller.

    Raises:
        BrokerageCredentialsMissingError: Neither the user nor the
            environment provides a key pair.
    """
    user = UserRepositoryAdapter(session_factory).get_by_id(user_id)
    if user is not None and user.has_brokerage_keys:
        credentials = BrokerageCredentials(user.alpaca_api_key, user.alpaca_secret_key)
    elif settings.alpaca_api_key and settings.alpaca_secret_key:
        credentials = BrokerageCredentials(settings.alpaca_api_key, settings.alpaca_secret_key)
    else:
        logger.warning("No Alpaca credentials for user id=%d", user_id)
        raise BrokerageCredentialsMissingError()

    return AlpacaBrokerageAdapter(
        credentials=credentials,
        base_url=settings.alpaca_base_url,
        data_url=settings.alpaca_data_url,
        feed=settings.alpaca_data_feed,
        timeout=settings.alpaca_timeout_seconds,
    )


def get_news_port() -> NewsPort:
    return StaticNewsAdapter()
