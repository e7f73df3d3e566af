"""
Basic application tests.

Validates that the FastAPI app starts correctly, the health endpoint
responds, every response carries the secure headers, and the
maintenance CLI dispatches its commands.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import inspect

from app import cli
from app.domain.advisor.errors import LLMRequestError
from app.infrastructure.persistence.database import build_engine, build_session_factory


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self, client: TestClient) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/api/health")
        assert response.status_code == 200

    def test_health_response_body(self, client: TestClient) -> None:
        """Health endpoint must return status and version fields."""
        body = client.get("/api/health").json()
        assert body["status"] == "ok"
        assert body["version"] == "0.1.0"

    def test_docs_disabled_outside_debug(self, client: TestClient) -> None:
        assert client.get("/docs").status_code == 404


class TestSecurityHeaders:
    """Tests for SecurityHeadersMiddleware."""

    def test_baseline_headers(self, client: TestClient) -> None:
        headers = client.get("/api/health").headers
        assert headers["X-Content-Type-Options"] == "nosniff"
        assert headers["X-Frame-Options"] == "DENY"
        assert headers["Content-Security-Policy"] == "default-src 'self'"

    def test_api_responses_are_not_cached(self, client: TestClient) -> None:
        assert client.get("/api/health").headers["Cache-Control"] == "no-store"

    def test_error_responses_get_headers_too(self, client: TestClient) -> None:
        response = client.get("/api/user")
        assert response.status_code == 401
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_unknown_route(self, client: TestClient) -> None:
        assert client.get("/api/does-not-exist").status_code == 404


# ══════════════════════════════════════════════════════════════════════
# CLI
# ══════════════════════════════════════════════════════════════════════


class TestCli:
    """Tests for app.cli.main()."""

    @pytest.fixture
    def engine(self, monkeypatch: pytest.MonkeyPatch):
        engine = build_engine("sqlite://")
        monkeypatch.setattr(cli, "get_engine", lambda: engine)
        monkeypatch.setattr(cli, "get_session_factory", lambda: build_session_factory(engine))
        yield engine
        engine.dispose()

    def test_migrate_then_seed(self, engine) -> None:
        assert cli.main(["migrate"]) == 0
        assert "lessons" in inspect(engine).get_table_names()
        assert cli.main(["seed"]) == 0
        assert cli.main(["seed"]) == 0

    def test_command_is_required(self) -> None:
        with pytest.raises(SystemExit):
            cli.main([])

    def test_generate_single_lesson(self, engine, monkeypatch: pytest.MonkeyPatch) -> None:
        use_case = MagicMock()
        monkeypatch.setattr(cli, "GenerateLessonUseCase", MagicMock(return_value=use_case))
        cli.main(["migrate"])

        code = cli.main(
            ["generate-lessons", "--title", "Options Basics", "--difficulty", "Advanced"]
        )

        assert code == 0
        (command,) = use_case.execute.call_args.args
        assert command.title == "Options Basics"
        assert command.description == "Options Basics"
        assert command.difficulty == "Advanced"

    def test_generate_curriculum_continues_after_failure(
        self, engine, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """One failed lesson does not stop the rest, but the exit code reports it."""
        use_case = MagicMock()
        use_case.execute.side_effect = [None, LLMRequestError("timeout"), None, None]
        monkeypatch.setattr(cli, "GenerateLessonUseCase", MagicMock(return_value=use_case))
        cli.main(["migrate"])

        assert cli.main(["generate-lessons"]) == 1
        assert use_case.execute.call_count == len(cli.DEFAULT_CURRICULUM)
