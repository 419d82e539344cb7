"""Tests for service endpoints and error handling."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from newstime.auth.exceptions import ConfigurationError
from newstime.auth.secret_store import get_secret_store
from newstime.config import Settings
from newstime.db.database import engine_options


class TestServiceEndpoints:
    """Tests for health and root endpoints."""

    def test_health(self, client: TestClient):
        """Test the health check reports a connected database."""
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["database"] == "connected"
        assert "timestamp" in data

    def test_health_database_down(self, client: TestClient):
        """Test the health check reports a failed database check."""
        with patch("newstime.main.check_connection", return_value=False):
            response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["database"] == "disconnected"

    def test_root(self, client: TestClient):
        """Test the root endpoint describes the API."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {
            "name": "24x7 News Time API",
            "version": "1.0.0",
            "documentation": "/api/health",
        }


class TestErrorHandling:
    """Tests for the global error shape."""

    def test_unknown_route(self, client: TestClient):
        """Test an unknown route answers a JSON 404."""
        response = client.get("/api/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"error": "Endpoint not found"}

    def test_unhandled_error(self, client: TestClient):
        """Test an unexpected exception answers a generic 500."""
        with patch(
            "newstime.posts.service.PostService.trending",
            side_effect=RuntimeError("boom"),
        ):
            response = client.get("/api/posts/trending")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestStartup:
    """Tests for the application lifespan."""

    def test_startup_refused_without_signing_secret(self):
        """Test the app does not start when JWT_SECRET is empty."""
        from newstime.main import app

        get_secret_store.cache_clear()
        try:
            with patch(
                "newstime.auth.secret_store.get_settings",
                return_value=Settings(jwt_secret=""),
            ):
                with pytest.raises(ConfigurationError):
                    with TestClient(app):
                        pass
        finally:
            get_secret_store.cache_clear()


class TestEngineOptions:
    """Tests for database engine options."""

    def test_sqlite_options(self):
        """Test SQLite gets a shareable connection and no pool sizing."""
        options = engine_options("sqlite:///:memory:")

        assert options["connect_args"] == {"check_same_thread": False}
        assert "pool_size" not in options

    def test_mysql_options(self):
        """Test MySQL gets a recycled, pre-pinged pool with utf8mb4."""
        options = engine_options("mysql+pymysql://u:p@db/newstime", debug=True)

        assert options["echo"] is True
        assert options["pool_pre_ping"] is True
        assert options["pool_recycle"] == 3600
        assert options["connect_args"] == {"charset": "utf8mb4"}
