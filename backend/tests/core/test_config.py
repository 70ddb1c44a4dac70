"""Tests for Settings — env-driven configuration."""

from metro_guide.config import Settings


def test_postgres_url_converted_to_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/metro")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/metro"


def test_other_urls_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"


def test_api_defaults(monkeypatch):
    monkeypatch.delenv("API_PREFIX", raising=False)
    monkeypatch.delenv("SESSION_HEADER", raising=False)
    settings = Settings()
    assert settings.api_prefix == "/api"
    assert settings.session_header == "x-session-id"
