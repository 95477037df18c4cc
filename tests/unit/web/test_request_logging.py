"""Tests for request-scoped logging and the uvicorn log config."""

import pytest
import structlog
from fastapi.testclient import TestClient
from structlog.testing import LogCapture
from uvicorn.config import LOGGING_CONFIG

from noteboard.app import App
from noteboard.config import Config
from noteboard.errors import AccessDeniedError, NotFoundError, UserError
from noteboard.web.error_handlers import classify_user_error
from noteboard.web.runner import ACCESS_LOG_FORMAT, build_log_config
from noteboard.web.server import create_fastapi_app


@pytest.fixture
def log_capture():
    capture = LogCapture()
    structlog.configure(processors=[structlog.contextvars.merge_contextvars, capture])
    yield capture
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def client(config):
    with TestClient(create_fastapi_app(App(config), config)) as client:
        yield client


class TestRequestContext:
    """Tests for the request context bound to log lines."""

    def test_user_error_is_logged_with_request_context(self, client, log_capture):
        response = client.get("/api/v1/users/1/notes/42", headers={"X-Actor-Id": "7"})
        assert response.status_code == 404

        entry = next(e for e in log_capture.entries if e["event"] == "user_error")
        assert entry["error_type"] == "not_found"
        assert entry["status_code"] == 404
        assert entry["method"] == "GET"
        assert entry["path"] == "/api/v1/users/1/notes/42"
        assert entry["actor_id"] == "7"

    def test_context_does_not_leak_between_requests(self, client, log_capture):
        client.get("/api/v1/users/1/notes/42", headers={"X-Actor-Id": "7"})
        client.post("/api/v1/notes", json={"title": "T", "text": "B"})

        entries = [e for e in log_capture.entries if e["event"] == "user_error"]
        assert [e["error_type"] for e in entries] == ["not_found", "authentication_error"]
        assert entries[1]["actor_id"] is None
        assert entries[1]["method"] == "POST"


class TestClassifyUserError:
    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (NotFoundError(), (404, "not_found")),
            (AccessDeniedError(), (403, "access_denied")),
            (UserError("other"), (400, "bad_request")),
        ],
    )
    def test_status_and_type(self, error, expected):
        assert classify_user_error(error) == expected


class TestLogConfig:
    """Tests for the uvicorn logging config."""

    def test_access_format_includes_client_address(self):
        log_config = build_log_config(Config(_env_file=None, debug=False))
        assert log_config["formatters"]["access"]["fmt"] == ACCESS_LOG_FORMAT
        assert "%(client_addr)s" in ACCESS_LOG_FORMAT
        assert log_config["loggers"]["uvicorn"]["level"] == "INFO"

    def test_debug_raises_uvicorn_verbosity(self):
        log_config = build_log_config(Config(_env_file=None, debug=True))
        assert log_config["loggers"]["uvicorn"]["level"] == "DEBUG"

    def test_uvicorn_default_is_not_mutated(self):
        original = LOGGING_CONFIG["formatters"]["access"]["fmt"]
        build_log_config(Config(_env_file=None))
        assert LOGGING_CONFIG["formatters"]["access"]["fmt"] == original
