"""Categories API routes."""

import logging

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.orm import Session

from newstime.categories.schemas import CategoryCreate, CategoryResponse, CategoryUpdate
from newstime.db.models import Category
from newstime.dependencies import CurrentAdmin, DbSession
from newstime.schemas import CreatedResponse, MessageResponse
from newstime.slugs import slugify, unique_slug

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_category_or_404(db: Session, category_id: int) -> Category:
    category = db.query(Category).filter(Category.id == category_id).first()
    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found",
        )
    return category


def _ensure_slug_free(db: Session, slug: str, exclude_id: int | None = None) -> None:
    query = db.query(Category).filter(Category.slug == slug)
    if exclude_id is not None:
        query = query.filter(Category.id != exclude_id)
    if query.first():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Category slug '{slug}' already exists",
        )


@router.get("", response_model=list[CategoryResponse])
async def list_categories(db: DbSession) -> list[CategoryResponse]:
    """List all categories ordered by name.

    Args:
        db: Database session.

    Returns:
        list[CategoryResponse]: All categories.
    """
    categories = db.query(Category).order_by(Category.name.asc()).all()
    return [CategoryResponse.model_validate(c) for c in categories]


@router.get("/{slug}", response_model=CategoryResponse)
async def get_category(slug: str, db: DbSession) -> CategoryResponse:
    """Get a category by slug.

    Args:
        slug: Category slug.
        db: Database session.

    Returns:
        CategoryResponse: The category.

    Raises:
        HTTPException: If category not found.
    """
    category = db.query(Category).filter(Category.slug == slug).first()
    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found",
        )
    return CategoryResponse.model_validate(category)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    data: CategoryCreate,
    db: DbSession,
    admin: CurrentAdmin,
) -> CreatedResponse:
    """Create a category.

    The slug is derived from the name when not supplied, or when the
    supplied one has no letters or digits.

    Args:
        data: Category creation data.
        db: Database session.
        admin: Verified admin token claims.

    Returns:
        CreatedResponse: New category id.

    Raises:
        HTTPException: If the slug is already taken.
    """
    slug = slugify(data.slug) if data.slug else ""
    if slug:
        _ensure_slug_free(db, slug)
    else:
        slug = unique_slug(db, Category, data.name)

    category = Category(
        name=data.name,
        slug=slug,
        description=data.description,
        icon=data.icon,
        color=data.color,
    )
    db.add(category)
    db.commit()
    db.refresh(category)

    logger.info(f"Created category {category.id} ({category.slug})")
    return CreatedResponse(id=category.id, message="Category created successfully")


@router.put("/{category_id}", response_model=MessageResponse)
async def update_category(
    category_id: int,
    data: CategoryUpdate,
    db: DbSession,
    admin: CurrentAdmin,
) -> MessageResponse:
    """Update a category.

    Args:
        category_id: Category ID.
        data: Fields to change.
        db: Database session.
        admin: Verified admin token claims.

    Returns:
        MessageResponse: Confirmation.

    Raises:
        HTTPException: If category not found or slug conflict.
    """
    category = _get_category_or_404(db, category_id)

    updates = data.model_dump(exclude_unset=True, exclude_none=True)
    if "slug" in updates:
        slug = slugify(updates["slug"])
        if slug:
            _ensure_slug_free(db, slug, exclude_id=category.id)
        else:
            name = updates.get("name") or category.name
            slug = unique_slug(db, Category, name, exclude_id=category.id)
        updates["slug"] = slug

    for field, value in updates.items():
        setattr(category, field, value)

    db.commit()
    return MessageResponse(message="Category updated successfully")


@router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(
    category_id: int,
    db: DbSession,
    admin: CurrentAdmin,
) -> MessageResponse:
    """Delete a category.

    Posts filed under it become uncategorized.

    Args:
        category_id: Category ID.
        db: Database session.
        admin: Verified admin token claims.

    Returns:
        MessageResponse: Confirmation.

    Raises:
        HTTPException: If category not found.
    """
    category = _get_category_or_404(db, category_id)

    db.delete(category)
    db.commit()

    logger.info(f"Deleted category {category_id}")
    return MessageResponse(message="Category deleted successfully")
