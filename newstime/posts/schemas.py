"""Pydantic schemas for posts."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for creating a post.

    Attributes:
        title: Headline.
        slug: URL slug, derived from the title when omitted.
        category_id: Category to file the post under.
        author_id: Author of the post.
        publish_date: Publication date, defaults to now.
    """

    title: str = Field(..., min_length=1, max_length=500)
    slug: str | None = Field(None, max_length=255)
    excerpt: str | None = None
    content: str | None = None
    featured_image: str | None = None
    category_id: int | None = None
    author_id: int | None = None
    tags: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    youtube_id: str | None = None
    is_featured: bool = False
    is_published: bool = True
    publish_date: datetime | None = None


class PostUpdate(BaseModel):
    """Schema for updating a post. Only supplied fields change."""

    title: str | None = Field(None, min_length=1, max_length=500)
    slug: str | None = Field(None, min_length=1, max_length=255)
    excerpt: str | None = None
    content: str | None = None
    featured_image: str | None = None
    category_id: int | None = None
    author_id: int | None = None
    tags: list[str] | None = None
    keywords: list[str] | None = None
    youtube_id: str | None = None
    is_featured: bool | None = None
    is_published: bool | None = None
    publish_date: datetime | None = None


class PostResponse(BaseModel):
    """Schema for post response, flattened with category and author info."""

    id: int
    title: str
    slug: str
    excerpt: str | None = None
    content: str | None = None
    featured_image: str | None = None
    category_id: int | None = None
    category_name: str | None = None
    category_slug: str | None = None
    category_color: str | None = None
    author_id: int | None = None
    author_name: str | None = None
    author_avatar: str | None = None
    author_bio: str | None = None
    tags: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    youtube_id: str | None = None
    is_featured: bool = False
    is_published: bool = True
    views: int = 0
    publish_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class PostSearchParams(BaseModel):
    """Schema for post listing filters."""

    category: str | None = None
    featured: bool = False
    search: str | None = None
    limit: int = 50
    offset: int = 0


class StatsOverview(BaseModel):
    """Schema for the admin dashboard counters."""

    totalPosts: int
    totalViews: int
    totalCategories: int
    totalVideos: int
