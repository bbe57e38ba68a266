"""
User Tasks API - Error Rendering Tests
"""

import pytest
from fastapi.testclient import TestClient

from usertasks.main import app
from usertasks.auth.dependencies import get_user_repository
from usertasks.errors import (
    ApiError,
    DuplicateUserError,
    ForbiddenError,
    TaskNotFoundError,
    UnauthenticatedError,
)


class BrokenRepository:
    """Repository whose every call fails, standing in for a database outage."""

    def __getattr__(self, name):
        async def fail(*args, **kwargs):
            raise ConnectionError("database unreachable")
        return fail


@pytest.fixture
def broken_client():
    async def override():
        return BrokenRepository()

    app.dependency_overrides[get_user_repository] = override
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


class TestErrorTaxonomy:
    def test_status_codes(self):
        assert DuplicateUserError().status_code == 400
        assert TaskNotFoundError().status_code == 404
        assert UnauthenticatedError().status_code == 401
        assert ForbiddenError().status_code == 403

    def test_custom_message(self):
        err = ApiError("Something specific")
        assert err.message == "Something specific"
        assert str(err) == "Something specific"

    def test_default_message(self):
        assert TaskNotFoundError().message == "Task not found"


class TestErrorResponses:
    def test_database_failure_is_generic_500(self, broken_client):
        response = broken_client.get("/users")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}

    def test_database_failure_on_register(self, broken_client):
        response = broken_client.post(
            "/users",
            json={"username": "a", "email": "a@example.com", "password": "pw"},
        )
        assert response.status_code == 500
        assert "database unreachable" not in response.text

    def test_unknown_route_is_json(self, client):
        response = client.get("/no-such-route")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_malformed_json_is_400(self, client):
        response = client.post(
            "/users",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert "error" in response.json()

    def test_validation_details_name_the_field(self, client):
        response = client.post("/users", json={"username": "x", "password": "y"})
        assert response.status_code == 400
        fields = [d["field"] for d in response.json()["details"]]
        assert "email" in fields
