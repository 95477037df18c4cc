"""Shared pytest fixtures."""

from datetime import UTC, datetime, timedelta

import pytest

from noteboard.app import App
from noteboard.config import Config


@pytest.fixture
def config():
    """Configuration isolated from .env files."""
    return Config(_env_file=None)


@pytest.fixture
def app(config):
    """Fresh application with the default relationship graph."""
    return App(config)


@pytest.fixture
def clock(monkeypatch):
    """Make comment creation times advance by one second per comment."""
    start = datetime(2024, 1, 1, tzinfo=UTC)
    ticks = iter(start + timedelta(seconds=i) for i in range(10_000))
    monkeypatch.setattr("noteboard.core.modules.comment.service.now", lambda: next(ticks))
    return start
