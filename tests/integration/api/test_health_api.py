"""HTTP tests for health probes and cross-cutting error handling."""

from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from tests.integration.api.conftest import API
from userhub.presentation.api.dependencies import get_user_context


class TestProbes:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Service is running",
            "data": {"status": "healthy"},
        }

    def test_ready(self, client):
        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json()["data"] == {
            "status": "ready",
            "database": "up",
            "cache": "disabled",
        }

    def test_not_ready_when_database_down(self, client):
        with patch(
            "userhub.presentation.api.routers.health.ping",
            AsyncMock(return_value=False),
        ):
            response = client.get("/ready")

        assert response.status_code == 503
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Service is not ready"
        assert body["error"]["database"] == "down"

    def test_cache_reported_when_configured(self, client, app):
        cache = AsyncMock()
        cache.ping.return_value = False
        app.state.cache = cache

        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json()["data"]["cache"] == "down"
        app.state.cache = None


class TestErrorEnvelope:
    def test_unknown_route(self, client):
        response = client.get("/does-not-exist")

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_unhandled_exception_is_hidden(self, app):
        def _boom():
            msg = "database exploded"
            raise RuntimeError(msg)

        app.dependency_overrides[get_user_context] = _boom

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get(f"{API}/users/me")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Internal server error",
        }
        assert "exploded" not in response.text
