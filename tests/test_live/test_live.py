"""Tests for live stream endpoints."""

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from newstime.db.models import LIVE_SETTINGS_ID, LiveSettings


class TestGetLiveSettings:
    """Tests for GET /api/live."""

    def test_defaults_when_unset(self, client: TestClient):
        """Test defaults are returned before anything was saved."""
        response = client.get("/api/live")

        assert response.status_code == 200
        data = response.json()
        assert data["is_live"] is False
        assert data["live_video_id"] == ""
        assert data["live_url"] == ""
        assert data["live_title"] == "LIVE NOW: 24x7 News Time"


class TestUpdateLiveSettings:
    """Tests for admin live stream controls."""

    def test_update_requires_admin(self, client: TestClient):
        """Test anonymous callers cannot change the live status."""
        response = client.post("/api/live/go-live", json={"video_id": "abc"})
        assert response.status_code == 401

    def test_put_creates_row(self, client: TestClient, admin_headers: dict, db: Session):
        """Test saving settings creates the single row."""
        response = client.put(
            "/api/live",
            json={"channel_id": "UC123", "live_video_id": "abc", "is_live": True},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Live settings updated successfully"}

        settings = db.get(LiveSettings, LIVE_SETTINGS_ID)
        assert settings.channel_id == "UC123"
        assert settings.is_live is True
        assert settings.live_title == "LIVE NOW: 24x7 News Time"

    def test_go_live_and_end_live(self, client: TestClient, admin_headers: dict):
        """Test switching the live banner on and off."""
        response = client.post(
            "/api/live/go-live",
            json={"video_id": "stream1", "title": "Budget speech"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json() == {"message": "You are now live!"}

        live = client.get("/api/live").json()
        assert live["is_live"] is True
        assert live["live_video_id"] == "stream1"
        assert live["live_title"] == "Budget speech"

        response = client.post("/api/live/end-live", headers=admin_headers)
        assert response.json() == {"message": "Live stream ended"}

        live = client.get("/api/live").json()
        assert live["is_live"] is False
        assert live["live_video_id"] == "stream1"

    def test_go_live_default_title(self, client: TestClient, admin_headers: dict):
        """Test going live without a title uses the default banner."""
        client.post("/api/live/go-live", json={"video_id": "stream1"}, headers=admin_headers)

        live = client.get("/api/live").json()
        assert live["live_title"] == "LIVE NOW: 24x7 News Time"
