import os
from unittest.mock import MagicMock

import mongomock
import pytest
from fastapi.testclient import TestClient

# ``holiday_calendar_api.app.main`` builds an app at import time; keep
# its logging quiet and give it a connection string.
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from holiday_calendar_api.app.core.config import Settings
from holiday_calendar_api.app.core.db import StorageGateway
from holiday_calendar_api.app.main import create_app


TEST_ORIGIN = "https://calendar.example.org"


class BrokenCollectionGateway(StorageGateway):
    """Gateway whose collection is a mock, used to simulate storage failures."""

    def __init__(self, collection: MagicMock) -> None:
        super().__init__(MagicMock(), "holidaycalendar", "holidays", owns_client=False)
        self._collection = collection

    @property
    def collection(self):
        return self._collection


@pytest.fixture
def test_settings() -> Settings:
    return Settings.from_env(
        mongo_uri="mongodb://localhost:27017",
        cors_allow_origin=TEST_ORIGIN,
        log_level="WARNING",
    )


@pytest.fixture
def gateway() -> StorageGateway:
    """Gateway around an in‑memory ``mongomock`` client."""
    return StorageGateway(mongomock.MongoClient(), "holidaycalendar", "holidays", owns_client=False)


@pytest.fixture
def collection(gateway):
    return gateway.collection


@pytest.fixture
def client(test_settings, gateway):
    app = create_app(settings=test_settings, gateway=gateway)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def broken_collection() -> MagicMock:
    return MagicMock()


@pytest.fixture
def broken_client(test_settings, broken_collection):
    """Client whose storage operations can be made to fail."""
    app = create_app(settings=test_settings, gateway=BrokenCollectionGateway(broken_collection))
    with TestClient(app) as c:
        yield c
