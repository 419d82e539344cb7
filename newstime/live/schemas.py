"""Pydantic schemas for the live stream status."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from newstime.db.models import DEFAULT_LIVE_TITLE


class LiveSettingsResponse(BaseModel):
    """Schema for the live stream status."""

    id: int | None = None
    channel_id: str = ""
    live_video_id: str = ""
    live_url: str = ""
    is_live: bool = False
    live_title: str = DEFAULT_LIVE_TITLE
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class LiveSettingsUpdate(BaseModel):
    """Schema for replacing the live stream status."""

    channel_id: str | None = None
    live_video_id: str | None = None
    live_url: str | None = None
    is_live: bool = False
    live_title: str | None = None


class GoLiveRequest(BaseModel):
    """Schema for switching the live banner on."""

    video_id: str | None = None
    title: str | None = None
