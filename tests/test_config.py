from __future__ import annotations

import pytest

from company_data.db.config import DEFAULT_CONNECTION_NAME, Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in (
        "CONNECTION_STRINGS",
        "CONNECTION_NAME",
        "POSTGRES_URL",
        "POSTGRES_USER",
        "POSTGRES_PASSWORD",
        "POSTGRES_DB",
        "POSTGRES_HOST",
        "POSTGRES_PORT",
    ):
        monkeypatch.delenv(key, raising=False)


def _settings(**kwargs) -> Settings:
    return Settings(_env_file=None, **kwargs)


def test_named_connection_string_from_env(monkeypatch):
    monkeypatch.setenv("CONNECTION_STRINGS", '{"SqlConnection": "postgresql://u:p@db:5432/companies"}')
    settings = _settings()
    assert settings.get_connection_string("SqlConnection") == "postgresql://u:p@db:5432/companies"
    assert settings.get_connection_string("Reporting") is None


def test_default_name_falls_back_to_postgres_variables():
    settings = _settings(POSTGRES_USER="u", POSTGRES_PASSWORD="p", POSTGRES_DB="companies")
    assert settings.get_connection_string(DEFAULT_CONNECTION_NAME) == (
        "postgresql://u:p@localhost:5432/companies"
    )


def test_postgres_url_wins_over_parts():
    settings = _settings(POSTGRES_URL="postgresql://x@h/db", POSTGRES_USER="u")
    assert settings.get_connection_string(DEFAULT_CONNECTION_NAME) == "postgresql://x@h/db"


def test_incomplete_configuration_resolves_to_none():
    settings = _settings(POSTGRES_USER="u")
    assert settings.get_connection_string(DEFAULT_CONNECTION_NAME) is None


def test_explicit_entry_beats_fallback():
    settings = _settings(
        CONNECTION_STRINGS={"SqlConnection": "sqlite+aiosqlite:///x.db"},
        POSTGRES_URL="postgresql://x@h/db",
    )
    assert settings.get_connection_string("SqlConnection") == "sqlite+aiosqlite:///x.db"


def test_fallback_only_for_configured_name():
    settings = _settings(CONNECTION_NAME="Main", POSTGRES_URL="postgresql://x@h/db")
    assert settings.get_connection_string("Main") == "postgresql://x@h/db"
    assert settings.get_connection_string(DEFAULT_CONNECTION_NAME) is None
