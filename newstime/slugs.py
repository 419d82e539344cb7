"""URL slug generation."""

import re

from sqlalchemy.orm import Session


def slugify(text: str) -> str:
    """Create a URL-friendly slug.

    Args:
        text: Source text (title or name).

    Returns:
        str: Lowercase slug of ``[a-z0-9-]`` characters.
    """
    slug = text.lower().strip()
    slug = re.sub(r"[^a-z0-9]+", "-", slug)
    return slug.strip("-")


def unique_slug(db: Session, model, text: str, exclude_id: int | None = None) -> str:
    """Create a slug that no other row of ``model`` uses.

    Args:
        db: Database session.
        model: SQLAlchemy model with a ``slug`` column.
        text: Source text.
        exclude_id: Row id to ignore (the row being updated).

    Returns:
        str: Unique slug, suffixed with ``-1``, ``-2``... on collision.
    """
    base_slug = slugify(text) or "item"
    slug = base_slug
    counter = 1
    while True:
        query = db.query(model).filter(model.slug == slug)
        if exclude_id is not None:
            query = query.filter(model.id != exclude_id)
        if not query.first():
            return slug
        slug = f"{base_slug}-{counter}"
        counter += 1
