"""Database module."""

from newstime.db.database import SessionLocal, engine, get_db, init_db
from newstime.db.models import Author, Base, Category, LiveSettings, Post, YouTubeVideo

__all__ = [
    "SessionLocal",
    "engine",
    "get_db",
    "init_db",
    "Base",
    "Author",
    "Category",
    "Post",
    "YouTubeVideo",
    "LiveSettings",
]
