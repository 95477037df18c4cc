"""Tests for environment-driven configuration."""

from noteboard.config import Config


def test_defaults(monkeypatch):
    monkeypatch.delenv("NOTEBOARD_PORT", raising=False)
    config = Config(_env_file=None)
    assert config.port == 8000
    assert config.comment_min_length == 2
    assert config.default_page_size == 10


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("NOTEBOARD_PORT", "9000")
    monkeypatch.setenv("NOTEBOARD_DEFAULT_PAGE_SIZE", "25")
    monkeypatch.setenv("NOTEBOARD_DEBUG", "true")

    config = Config(_env_file=None)
    assert config.port == 9000
    assert config.default_page_size == 25
    assert config.debug is True
