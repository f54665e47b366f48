"""
MongoDB storage gateway.

A single ``StorageGateway`` wraps the ``pymongo`` client used by every
request.  It is created once at application startup by ``connect`` and
stored on ``app.state``; request handlers receive it through the
``get_gateway`` dependency rather than importing a module‑level client.
Tests construct a gateway around a ``mongomock`` client and pass it to
``create_app`` directly.

``pymongo.MongoClient`` is thread‑safe and pools its own connections,
so the gateway adds no locking of its own.
"""

import logging
from typing import Any, Optional

import pymongo
from fastapi import Request
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .config import Settings


logger = logging.getLogger(__name__)


class StorageUnavailableError(RuntimeError):
    """Raised when the database cannot be reached during startup."""


class StorageGateway:
    """Shared handle to the holidays collection."""

    def __init__(self, client: Any, database_name: str, collection_name: str, owns_client: bool = True) -> None:
        self.client = client
        self.database_name = database_name
        self.collection_name = collection_name
        self._owns_client = owns_client

    @property
    def collection(self) -> Collection:
        return self.client[self.database_name][self.collection_name]

    def ping(self, timeout: float) -> None:
        """Round‑trip to the server, bounded by ``timeout`` seconds."""
        with pymongo.timeout(timeout):
            self.client.admin.command("ping")

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    @classmethod
    def connect(cls, settings: Settings) -> "StorageGateway":
        """Create the client from ``settings`` and verify the connection.

        The driver connects lazily, so a ``ping`` is issued to make an
        unreachable server fail here instead of on the first request.

        Raises
        ------
        ConfigurationError
            If ``MONGO_URI`` is not set.
        StorageUnavailableError
            If the server does not answer within ``connect_timeout``.
        """
        uri = settings.require_mongo_uri()
        timeout_ms = int(settings.connect_timeout * 1000)
        client = pymongo.MongoClient(
            uri,
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
        )
        gateway = cls(client, settings.database_name, settings.collection_name)
        try:
            gateway.ping(settings.connect_timeout)
        except PyMongoError as exc:
            client.close()
            raise StorageUnavailableError(f"Could not connect to MongoDB: {exc}") from exc
        logger.info(
            "Connected to MongoDB (database=%s, collection=%s)",
            settings.database_name,
            settings.collection_name,
        )
        return gateway


def get_gateway(request: Request) -> StorageGateway:
    """FastAPI dependency returning the gateway stored on the application."""
    gateway: Optional[StorageGateway] = getattr(request.app.state, "gateway", None)
    if gateway is None:
        raise StorageUnavailableError("Storage gateway has not been initialised")
    return gateway
