"""Pydantic schemas for categories."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class CategoryCreate(BaseModel):
    """Schema for creating a category."""

    name: str = Field(..., min_length=1, max_length=100)
    slug: str | None = Field(None, max_length=120)
    description: str = ""
    icon: str = "Newspaper"
    color: str = Field("#DC2626", pattern=_COLOR_PATTERN)


class CategoryUpdate(BaseModel):
    """Schema for updating a category."""

    name: str | None = Field(None, min_length=1, max_length=100)
    slug: str | None = Field(None, min_length=1, max_length=120)
    description: str | None = None
    icon: str | None = None
    color: str | None = Field(None, pattern=_COLOR_PATTERN)


class CategoryResponse(BaseModel):
    """Schema for category response."""

    id: int
    name: str
    slug: str
    description: str | None = ""
    icon: str | None = None
    color: str | None = None
    post_count: int = 0
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
