"""Cross‑origin headers and preflight handling."""

import pytest
from bson import ObjectId
from fastapi import status
from pymongo.errors import ServerSelectionTimeoutError

from tests.conftest import TEST_ORIGIN


EXPECTED_HEADERS = {
    "access-control-allow-origin": TEST_ORIGIN,
    "access-control-allow-methods": "GET, POST, DELETE, OPTIONS",
    "access-control-allow-headers": "Content-Type, Authorization",
}


def assert_cors_headers(response):
    for name, value in EXPECTED_HEADERS.items():
        assert response.headers.get(name) == value


class TestCorsHeaders:

    def test_successful_responses_carry_headers(self, client):
        assert_cors_headers(client.get("/holidays"))
        assert_cors_headers(client.post("/holidays", json={"name": "Christmas"}))
        assert_cors_headers(client.delete(f"/holidays/{ObjectId()}"))

    def test_client_errors_carry_headers(self, client):
        bad_body = client.post("/holidays", content="{", headers={"Content-Type": "application/json"})
        bad_id = client.delete("/holidays/abc")

        assert bad_body.status_code == status.HTTP_400_BAD_REQUEST
        assert bad_id.status_code == status.HTTP_400_BAD_REQUEST
        assert_cors_headers(bad_body)
        assert_cors_headers(bad_id)

    def test_server_errors_carry_headers(self, broken_client, broken_collection):
        broken_collection.find.side_effect = ServerSelectionTimeoutError("no servers")

        response = broken_client.get("/holidays")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert_cors_headers(response)

    def test_unrouted_request_carries_headers(self, client):
        # Every path matches the OPTIONS catch‑all, so other methods get 405.
        response = client.get("/does-not-exist")

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert_cors_headers(response)


class TestPreflight:

    @pytest.mark.parametrize("path", ["/holidays", f"/holidays/{ObjectId()}", "/holidays/abc", "/anything/else"])
    def test_options_returns_empty_200(self, client, path):
        response = client.options(path)

        assert response.status_code == status.HTTP_200_OK
        assert response.content == b""
        assert_cors_headers(response)

    def test_options_does_not_touch_storage(self, broken_client, broken_collection):
        broken_client.options("/holidays")
        broken_client.options(f"/holidays/{ObjectId()}")

        broken_collection.insert_one.assert_not_called()
        broken_collection.find.assert_not_called()
        broken_collection.delete_one.assert_not_called()

    def test_catch_all_route_answers_without_middleware(self):
        from fastapi import FastAPI
        from fastapi.testclient import TestClient

        from holiday_calendar_api.app.api.router import router

        bare = FastAPI()
        bare.include_router(router)

        response = TestClient(bare).options("/some/unregistered/path")

        assert response.status_code == status.HTTP_200_OK
        assert response.content == b""
