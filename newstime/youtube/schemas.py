"""Pydantic schemas for YouTube videos."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

THUMBNAIL_URL_TEMPLATE = "https://img.youtube.com/vi/{video_id}/maxresdefault.jpg"


class VideoCreate(BaseModel):
    """Schema for adding a video."""

    video_id: str = Field(..., min_length=1, max_length=50)
    title: str = Field(..., min_length=1, max_length=500)
    description: str = ""
    thumbnail: str | None = None
    category: str = "general"
    views: str = "0"
    display_order: int = 0


class VideoUpdate(BaseModel):
    """Schema for updating a video."""

    video_id: str | None = Field(None, min_length=1, max_length=50)
    title: str | None = Field(None, min_length=1, max_length=500)
    description: str | None = None
    thumbnail: str | None = None
    category: str | None = None
    views: str | None = None
    display_order: int | None = None


class VideoResponse(BaseModel):
    """Schema for video response."""

    id: int
    video_id: str
    title: str
    description: str | None = ""
    thumbnail: str
    category: str | None = None
    views: str | None = "0"
    is_live: bool = False
    display_order: int = 0
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
