"""Settings loaded from the environment."""

import pytest

from holiday_calendar_api.app.core.config import ConfigurationError, Settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "PROJECT_NAME",
        "API_VERSION",
        "LOG_LEVEL",
        "LOG_FILE",
        "HOST",
        "MONGO_URI",
        "PORT",
        "MONGO_DATABASE",
        "MONGO_COLLECTION",
        "CORS_ALLOW_ORIGIN",
        "CORS_ALLOW_HEADERS",
        "WRITE_TIMEOUT_SECONDS",
        "READ_TIMEOUT_SECONDS",
        "CONNECT_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings.from_env()

    assert settings.port == 8080
    assert settings.database_name == "holidaycalendar"
    assert settings.collection_name == "holidays"
    assert settings.connect_timeout == 10
    assert settings.write_timeout == 5
    assert settings.read_timeout == 30
    assert settings.cors_allow_origin == "https://dhruvgirigoswami.github.io"
    assert settings.cors_allow_headers == ("Content-Type", "Authorization")


def test_reads_environment(clean_env):
    clean_env.setenv("MONGO_URI", "mongodb://db:27017")
    clean_env.setenv("PORT", "9000")
    clean_env.setenv("CORS_ALLOW_ORIGIN", "https://example.com")
    clean_env.setenv("READ_TIMEOUT_SECONDS", "2.5")

    settings = Settings.from_env()

    assert settings.require_mongo_uri() == "mongodb://db:27017"
    assert settings.port == 9000
    assert settings.cors_allow_origin == "https://example.com"
    assert settings.read_timeout == 2.5


def test_empty_port_falls_back_to_default(clean_env):
    clean_env.setenv("PORT", "")

    assert Settings.from_env().port == 8080


def test_invalid_number_raises(clean_env):
    clean_env.setenv("PORT", "eighty")

    with pytest.raises(ConfigurationError):
        Settings.from_env()


def test_missing_mongo_uri_raises(clean_env):
    settings = Settings.from_env()

    with pytest.raises(ConfigurationError, match="MONGO_URI"):
        settings.require_mongo_uri()


def test_overrides_win_over_environment(clean_env):
    clean_env.setenv("MONGO_DATABASE", "fromenv")

    settings = Settings.from_env(database_name="override")

    assert settings.database_name == "override"


def test_invalid_port_names_the_variable(clean_env):
    clean_env.setenv("PORT", "80a")

    with pytest.raises(ConfigurationError, match="PORT"):
        Settings.from_env()


def test_unset_environment_matches_field_defaults(clean_env):
    assert Settings.from_env() == Settings()
