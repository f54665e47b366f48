"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for everything except ``MONGO_URI``;
the connection string must be supplied by the deployment and startup is
aborted when it is missing (see ``core.db``).

Fixed client‑facing error messages are kept here as module constants so
handlers and tests refer to the same text.
"""

import os
from dataclasses import dataclass
from typing import Tuple


# Plain‑text bodies returned to clients on failure.
DECODE_ERROR_MESSAGE = "Error decoding request"
INSERT_ERROR_MESSAGE = "Error inserting holiday"
FETCH_ERROR_MESSAGE = "Error fetching holidays"
DELETE_ERROR_MESSAGE = "Error deleting holiday"
INVALID_ID_MESSAGE = "Invalid ID"


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing or malformed."""


def _split_csv(value: str) -> Tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


# Environment variable read for each ``Settings`` field.
_ENV_VARS = {
    "project_name": "PROJECT_NAME",
    "api_version": "API_VERSION",
    "log_level": "LOG_LEVEL",
    "log_file": "LOG_FILE",
    "host": "HOST",
    "port": "PORT",
    "mongo_uri": "MONGO_URI",
    "database_name": "MONGO_DATABASE",
    "collection_name": "MONGO_COLLECTION",
    "connect_timeout": "CONNECT_TIMEOUT_SECONDS",
    "write_timeout": "WRITE_TIMEOUT_SECONDS",
    "read_timeout": "READ_TIMEOUT_SECONDS",
    "cors_allow_origin": "CORS_ALLOW_ORIGIN",
    "cors_allow_headers": "CORS_ALLOW_HEADERS",
}

_CONVERTERS = {
    "port": int,
    "connect_timeout": float,
    "write_timeout": float,
    "read_timeout": float,
    "cors_allow_headers": _split_csv,
}


@dataclass
class Settings:
    """Application settings.

    Field defaults apply when the corresponding environment variable is
    unset or empty.  Use ``Settings.from_env`` to build an instance.
    """

    project_name: str = "Holiday Calendar API"
    api_version: str = "1.0.0"
    log_level: str = "INFO"
    log_file: str = ""

    host: str = "0.0.0.0"
    port: int = 8080

    # MongoDB connection string.  Required; an empty value stops the
    # application during startup.
    mongo_uri: str = ""
    database_name: str = "holidaycalendar"
    collection_name: str = "holidays"

    # Per‑operation timeouts in seconds.
    connect_timeout: float = 10
    write_timeout: float = 5
    read_timeout: float = 30

    # Cross‑origin policy applied to every response.  Only a single
    # origin is allowed.
    cors_allow_origin: str = "https://dhruvgirigoswami.github.io"
    cors_allow_methods: Tuple[str, ...] = ("GET", "POST", "DELETE", "OPTIONS")
    cors_allow_headers: Tuple[str, ...] = ("Content-Type", "Authorization")

    @classmethod
    def from_env(cls, **overrides) -> "Settings":
        """Build ``Settings`` from the current environment.

        Keyword ``overrides`` win over the environment; tests use this to
        avoid touching ``os.environ``.

        Raises
        ------
        ConfigurationError
            If a numeric variable such as ``PORT`` cannot be parsed.
        """
        values = {}
        for name, var in _ENV_VARS.items():
            raw = os.getenv(var, "").strip()
            if not raw:
                continue
            convert = _CONVERTERS.get(name, str)
            try:
                values[name] = convert(raw)
            except ValueError as exc:
                raise ConfigurationError(f"Invalid value for {var}: {raw!r}") from exc
        values.update(overrides)
        return cls(**values)

    def require_mongo_uri(self) -> str:
        """Return the MongoDB URI or raise if it is not configured."""
        if not self.mongo_uri:
            raise ConfigurationError("MONGO_URI environment variable is not set")
        return self.mongo_uri


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings.from_env()
