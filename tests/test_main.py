"""
Tests for main.py application setup.
"""

import pytest
from fastapi.testclient import TestClient

from store.database import StoreInitializationError


@pytest.fixture
def reset_observations():
    from api.routes import set_observations_coordinator

    set_observations_coordinator(None)
    yield
    set_observations_coordinator(None)


class TestApplicationStartup:
    """Test application startup and configuration."""

    def test_app_import(self):
        """Should import app successfully."""
        from main import app

        assert app is not None
        assert app.title == "MyCosmo"

    def test_routes_included(self):
        """Should mount the router both at root and under /api/v1."""
        from main import app

        routes = app.openapi()["paths"]
        assert "/health" in routes
        assert "/api/v1/health" in routes
        assert "/api/v1/observations" in routes

    def test_startup_opens_store(self, reset_observations, monkeypatch):
        """Should open the observation store during startup."""
        from api import routes
        from main import app

        monkeypatch.setenv("MYCOSMO_DATABASE_URL", "sqlite:///:memory:")

        with TestClient(app) as client:
            assert routes._observations is not None
            assert client.get("/observations").json() == []

    def test_startup_fails_without_store(self, reset_observations, monkeypatch, tmp_path):
        """An unusable store should abort startup."""
        from main import app

        monkeypatch.setenv("MYCOSMO_DATABASE_URL", f"sqlite:///{tmp_path}/missing/dir/mycosmo.db")

        with pytest.raises(StoreInitializationError):
            with TestClient(app):
                pass


class TestRootEndpoint:
    """Test the root entry point."""

    def test_root(self, reset_observations, monkeypatch):
        from main import app

        monkeypatch.setenv("MYCOSMO_DATABASE_URL", "sqlite:///:memory:")

        with TestClient(app) as client:
            response = client.get("/")

        assert response.status_code == 200
        assert response.json()["docs"] == "/docs"
