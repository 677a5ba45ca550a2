"""
Tests for core/config.py.
"""

import pytest
from pydantic import ValidationError

from core.config import Settings, get_settings, reload_settings


def test_default_database_url_uses_asyncpg(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(_env_file=None, POSTGRES_USER="u", POSTGRES_PASSWORD="p", POSTGRES_DB="d")

    assert settings.get_database_url() == "postgresql+asyncpg://u:p@localhost:5432/d"


def test_database_url_override(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./dev.db")
    settings = Settings(_env_file=None)

    assert settings.get_database_url() == "sqlite+aiosqlite:///./dev.db"


def test_log_level_is_normalized():
    settings = Settings(_env_file=None, LOG_LEVEL="debug")
    assert settings.LOG_LEVEL == "DEBUG"


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, LOG_LEVEL="LOUD")


def test_invalid_pool_size_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, DB_POOL_SIZE=0)


def test_get_settings_is_cached_until_reload(monkeypatch):
    monkeypatch.setenv("API_PORT", "9001")
    first = reload_settings()

    assert get_settings() is first
    assert first.API_PORT == 9001

    monkeypatch.setenv("API_PORT", "9002")
    assert reload_settings().API_PORT == 9002
    get_settings.cache_clear()
