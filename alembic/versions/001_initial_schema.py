"""Initial database schema.

Revision ID: 001
Revises:
Create Date: 2026-10-19

Complete schema for the News Time portal:
- Categories and authors
- Posts with tags/keywords and view counters
- YouTube video references
- Single-row live stream settings
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""

    # Categories table
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("slug", sa.String(120), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon", sa.String(50), nullable=True, server_default="Newspaper"),
        sa.Column("color", sa.String(7), nullable=True, server_default="#DC2626"),
        sa.Column("post_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.UniqueConstraint("slug"),
    )

    # Authors table
    op.create_table(
        "authors",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("avatar", sa.String(500), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
    )

    # Posts table
    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("excerpt", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("featured_image", sa.String(1000), nullable=True),
        sa.Column("category_id", sa.Integer(), nullable=True),
        sa.Column("author_id", sa.Integer(), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=True),
        sa.Column("keywords", sa.JSON(), nullable=True),
        sa.Column("youtube_id", sa.String(50), nullable=True),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default="0"),
        sa.Column("is_published", sa.Boolean(), nullable=False, server_default="1"),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("publish_date", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["author_id"], ["authors.id"], ondelete="SET NULL"),
        sa.UniqueConstraint("slug"),
    )
    op.create_index("ix_posts_publish_date", "posts", ["publish_date"])
    op.create_index("ix_posts_category_id", "posts", ["category_id"])

    # YouTube videos table
    op.create_table(
        "youtube_videos",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("video_id", sa.String(50), nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("thumbnail", sa.String(1000), nullable=False),
        sa.Column("category", sa.String(100), nullable=True, server_default="general"),
        sa.Column("views", sa.String(50), nullable=True, server_default="0"),
        sa.Column("is_live", sa.Boolean(), nullable=False, server_default="0"),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
    )

    # Live stream settings (single row, id = 1)
    op.create_table(
        "live_settings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("channel_id", sa.String(100), nullable=True, server_default=""),
        sa.Column("live_video_id", sa.String(50), nullable=True, server_default=""),
        sa.Column("live_url", sa.String(1000), nullable=True, server_default=""),
        sa.Column("is_live", sa.Boolean(), nullable=False, server_default="0"),
        sa.Column(
            "live_title",
            sa.String(500),
            nullable=True,
            server_default="LIVE NOW: 24x7 News Time",
        ),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table("live_settings")
    op.drop_table("youtube_videos")
    op.drop_table("posts")
    op.drop_table("authors")
    op.drop_table("categories")
