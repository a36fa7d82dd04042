"""Integration tests for the runtime config and health endpoints."""

import pytest
from factories import make_settings
from fastapi.testclient import TestClient

from portal.main import create_app


@pytest.fixture
def app_client():
    """Build the app after the test has set up the environment."""

    def build() -> TestClient:
        return TestClient(create_app(make_settings()))

    return build


class TestRuntimeConfigEndpoint:
    def test_default_detach(self, app_client, monkeypatch):
        monkeypatch.delenv("FOLDER_DELETE_MODE", raising=False)

        with app_client() as client:
            response = client.get("/api/runtime-config")

        assert response.status_code == 200
        assert response.json() == {"FOLDER_DELETE_MODE": "DETACH"}

    @pytest.mark.parametrize("mode", ["CASCADE", "PROMPT"])
    def test_from_environment(self, app_client, monkeypatch, mode):
        monkeypatch.setenv("FOLDER_DELETE_MODE", mode.lower())

        with app_client() as client:
            response = client.get("/api/runtime-config")

        assert response.json() == {"FOLDER_DELETE_MODE": mode}

    def test_no_auth_required(self, client: TestClient):
        assert client.get("/api/runtime-config").status_code == 200


class TestHealth:
    def test_health(self, client: TestClient):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": "ok"}


class TestAppContext:
    def test_context_owns_configured_client(self, monkeypatch):
        monkeypatch.setenv("RUNTIME_CONFIG_URL", "http://portal.internal/api/runtime-config")
        monkeypatch.delenv("RUNTIME_CONFIG_TIMEOUT", raising=False)

        with TestClient(create_app(make_settings())) as client:
            runtime_client = client.app.state.context.runtime_config_client

        assert runtime_client.url == "http://portal.internal/api/runtime-config"
        assert runtime_client.timeout == 5.0
        assert runtime_client.cached is None
