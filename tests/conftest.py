"""
Shared fixtures.

Environment overrides are applied before the application is imported so
that settings, the rate limiter and bcrypt pick them up.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ALPACA_API_KEY"] = ""
os.environ["ALPACA_SECRET_KEY"] = ""
os.environ["OPENAI_API_KEY"] = ""

from typing import Iterator  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402
from fastapi import Depends  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from app.domain.advisor.ports import LLMPort  # noqa: E402
from app.domain.market.ports import BrokeragePort  # noqa: E402
from app.infrastructure.persistence.database import build_engine, build_session_factory  # noqa: E402
from app.infrastructure.persistence.migrations import migrate  # noqa: E402
from app.infrastructure.persistence.seed import seed  # noqa: E402
from app.interfaces.advisor.dependencies import get_llm_port  # noqa: E402
from app.interfaces.dependencies import get_current_user_id, get_session_factory  # noqa: E402
from app.interfaces.market.dependencies import get_brokerage_port  # noqa: E402
from app.main import app  # noqa: E402

PASSWORD = "secret123"


@pytest.fixture
def session_factory() -> Iterator[sessionmaker[Session]]:
    """A fresh in-memory database with every table created."""
    engine = build_engine("sqlite://")
    migrate(engine)
    yield build_session_factory(engine)
    engine.dispose()


@pytest.fixture
def seeded_factory(session_factory: sessionmaker[Session]) -> sessionmaker[Session]:
    """In-memory database holding the starter content."""
    seed(session_factory)
    return session_factory


@pytest.fixture
def fake_brokerage() -> MagicMock:
    return MagicMock(spec=BrokeragePort)


@pytest.fixture
def fake_llm() -> MagicMock:
    return MagicMock(spec=LLMPort)


@pytest.fixture
def client(
    seeded_factory: sessionmaker[Session],
    fake_brokerage: MagicMock,
    fake_llm: MagicMock,
) -> Iterator[TestClient]:
    """TestClient on a seeded database with fake brokerage and LLM adapters.

    The brokerage override still requires a session, like the real one.
    """

    def brokerage_for_user(_user_id: int = Depends(get_current_user_id)) -> BrokeragePort:
        return fake_brokerage

    app.dependency_overrides[get_session_factory] = lambda: seeded_factory
    app.dependency_overrides[get_brokerage_port] = brokerage_for_user
    app.dependency_overrides[get_llm_port] = lambda: fake_llm
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client: TestClient, username: str = "alice", password: str = PASSWORD) -> dict:
    """Register (and thereby log in) a user; return the user body."""
    response = client.post("/api/register", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["user"]


@pytest.fixture
def logged_in(client: TestClient) -> TestClient:
    """The client with a registered, logged-in user "alice"."""
    register(client)
    return client
