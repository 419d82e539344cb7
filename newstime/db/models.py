"""SQLAlchemy database models."""

from datetime import datetime
from typing import Optional

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.sql import func

LIVE_SETTINGS_ID = 1
DEFAULT_LIVE_TITLE = "LIVE NOW: 24x7 News Time"


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class Category(Base):
    """News category.

    Attributes:
        id: Primary key.
        name: Display name.
        slug: URL-friendly unique identifier.
        description: Short description.
        icon: Icon name used by the frontend.
        color: Hex color code.
        post_count: Number of posts filed under this category.
        created_at: Creation timestamp.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(120), unique=True, nullable=False)
    description: Mapped[str] = mapped_column(Text, default="")
    icon: Mapped[str] = mapped_column(String(50), default="Newspaper")
    color: Mapped[str] = mapped_column(String(7), default="#DC2626")
    post_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    # Relationships
    posts: Mapped[list["Post"]] = relationship("Post", back_populates="category")


class Author(Base):
    """Post author.

    Attributes:
        id: Primary key.
        name: Author name.
        avatar: Avatar image URL.
        bio: Short biography.
    """

    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    avatar: Mapped[str | None] = mapped_column(String(500), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    # Relationships
    posts: Mapped[list["Post"]] = relationship("Post", back_populates="author")


class Post(Base):
    """News post.

    Attributes:
        id: Primary key.
        title: Headline.
        slug: URL-friendly unique identifier.
        excerpt: Teaser shown in listings.
        content: Article body (markdown).
        featured_image: Hero image URL.
        category_id: Foreign key to category.
        author_id: Foreign key to author.
        tags: List of tag strings.
        keywords: List of SEO keywords.
        youtube_id: Optional embedded YouTube video id.
        is_featured: Shown in the hero slider.
        is_published: Visible on the public site.
        views: Read counter.
        publish_date: Publication date used for ordering.
    """

    __tablename__ = "posts"
    __table_args__ = (
        Index("ix_posts_publish_date", "publish_date"),
        Index("ix_posts_category_id", "category_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    excerpt: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    featured_image: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    category_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True
    )
    author_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("authors.id", ondelete="SET NULL"), nullable=True
    )
    tags: Mapped[list] = mapped_column(JSON, default=list)
    keywords: Mapped[list] = mapped_column(JSON, default=list)
    youtube_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_published: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    views: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    publish_date: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    category: Mapped[Optional["Category"]] = relationship("Category", back_populates="posts")
    author: Mapped[Optional["Author"]] = relationship("Author", back_populates="posts")


class YouTubeVideo(Base):
    """YouTube video reference shown in the video section.

    Attributes:
        id: Primary key.
        video_id: YouTube video id.
        title: Video title.
        description: Video description.
        thumbnail: Thumbnail URL.
        category: Free-form category label.
        views: Display string for the view count (e.g. "1.2M").
        is_live: Whether this entry is a live stream.
        display_order: Ascending sort key.
    """

    __tablename__ = "youtube_videos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    video_id: Mapped[str] = mapped_column(String(50), nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="")
    thumbnail: Mapped[str] = mapped_column(String(1000), nullable=False)
    category: Mapped[str] = mapped_column(String(100), default="general")
    views: Mapped[str] = mapped_column(String(50), default="0")
    is_live: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    display_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )


class LiveSettings(Base):
    """Single-row live stream status.

    Attributes:
        id: Always LIVE_SETTINGS_ID.
        channel_id: YouTube channel id.
        live_video_id: Video id of the current live stream.
        live_url: Optional external live URL.
        is_live: Whether the site shows the live banner.
        live_title: Banner title.
    """

    __tablename__ = "live_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=LIVE_SETTINGS_ID)
    channel_id: Mapped[str] = mapped_column(String(100), default="")
    live_video_id: Mapped[str] = mapped_column(String(50), default="")
    live_url: Mapped[str] = mapped_column(String(1000), default="")
    is_live: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    live_title: Mapped[str] = mapped_column(String(500), default=DEFAULT_LIVE_TITLE)
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )
