"""Tests for hello and health endpoints."""

from fastapi.testclient import TestClient

from app.main import create_app


class TestHelloEndpoint:
    """GET /api/hello."""

    def test_returns_seeded_greeting(self, test_client):
        response = test_client.get("/api/hello")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Hello World from DevFest PTA 2025!"
        assert data["source"] == "database"
        assert "timestamp" in data

    def test_custom_default_greeting(self, test_settings):
        custom = test_settings.model_copy(update={"default_greeting": "Welcome!"})

        with TestClient(create_app(custom)) as client:
            response = client.get("/api/hello")

        assert response.json()["message"] == "Welcome!"


class TestHealthEndpoint:
    """GET /api/health."""

    def test_health_check(self, test_client):
        response = test_client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["service"] == "devfest-backend"
        assert "timestamp" in data


class TestCors:
    """CORS policy follows the environment."""

    def test_frontend_origin_allowed(self, test_client):
        response = test_client.get(
            "/api/health", headers={"Origin": "http://localhost:3000"}
        )

        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_other_origin_not_allowed_outside_production(self, test_client):
        response = test_client.get(
            "/api/health", headers={"Origin": "http://evil.example"}
        )

        assert "access-control-allow-origin" not in response.headers

    def test_any_origin_in_production(self, test_settings):
        production = test_settings.model_copy(update={"environment": "production"})

        with TestClient(create_app(production)) as client:
            response = client.get(
                "/api/health", headers={"Origin": "http://evil.example"}
            )

        assert "access-control-allow-origin" in response.headers


class TestDocs:
    """OpenAPI docs stay available."""

    def test_openapi_json_endpoint(self, test_client):
        response = test_client.get("/openapi.json")

        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/api/applications" in paths
        assert "/api/applications/stats/summary" in paths
