"""Posts API routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from newstime.dependencies import CurrentAdmin, get_db
from newstime.posts.schemas import (
    PostCreate,
    PostResponse,
    PostSearchParams,
    PostUpdate,
    StatsOverview,
)
from newstime.posts.service import PostService, get_post_service
from newstime.schemas import CreatedResponse, MessageResponse

router = APIRouter()


def get_service(db: Annotated[Session, Depends(get_db)]) -> PostService:
    """Get post service dependency."""
    return get_post_service(db)


@router.get("", response_model=list[PostResponse])
async def list_posts(
    service: Annotated[PostService, Depends(get_service)],
    category: str | None = Query(None, description="Category slug"),
    featured: bool = Query(False, description="Only featured posts"),
    search: str | None = Query(None, description="Text to find in title, excerpt or content"),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
) -> list[PostResponse]:
    """List published posts, newest first.

    Args:
        service: Post service.
        category: Category slug filter.
        featured: Only featured posts.
        search: Substring search.
        limit: Maximum number of posts.
        offset: Number of posts to skip.

    Returns:
        list[PostResponse]: Matching posts.
    """
    params = PostSearchParams(
        category=category,
        featured=featured,
        search=search,
        limit=limit,
        offset=offset,
    )
    return [service.to_response(p) for p in service.list_posts(params)]


@router.get("/trending", response_model=list[PostResponse])
async def trending_posts(
    service: Annotated[PostService, Depends(get_service)],
) -> list[PostResponse]:
    """Get the five most viewed published posts.

    Args:
        service: Post service.

    Returns:
        list[PostResponse]: Trending posts.
    """
    return [service.to_response(p) for p in service.trending()]


@router.get("/stats/overview", response_model=StatsOverview)
async def stats_overview(
    service: Annotated[PostService, Depends(get_service)],
    admin: CurrentAdmin,
) -> StatsOverview:
    """Get admin dashboard counters.

    Args:
        service: Post service.
        admin: Verified admin token claims.

    Returns:
        StatsOverview: Totals.
    """
    return service.get_stats()


@router.get("/{slug}", response_model=PostResponse)
async def get_post(
    slug: str,
    service: Annotated[PostService, Depends(get_service)],
) -> PostResponse:
    """Get a post by slug and count the view.

    Args:
        slug: Post slug.
        service: Post service.

    Returns:
        PostResponse: The post, including the author's bio.

    Raises:
        HTTPException: If post not found.
    """
    post = service.get_by_slug(slug)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )

    post = service.record_view(post)
    return service.to_response(post, include_author_bio=True)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    data: PostCreate,
    service: Annotated[PostService, Depends(get_service)],
    admin: CurrentAdmin,
) -> CreatedResponse:
    """Create a post.

    Args:
        data: Post creation data.
        service: Post service.
        admin: Verified admin token claims.

    Returns:
        CreatedResponse: New post id.

    Raises:
        HTTPException: If the slug is taken or a referenced row is missing.
    """
    try:
        post = service.create(data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    return CreatedResponse(id=post.id, message="Post created successfully")


@router.put("/{post_id}", response_model=MessageResponse)
async def update_post(
    post_id: int,
    data: PostUpdate,
    service: Annotated[PostService, Depends(get_service)],
    admin: CurrentAdmin,
) -> MessageResponse:
    """Update a post.

    Args:
        post_id: Post ID.
        data: Fields to change.
        service: Post service.
        admin: Verified admin token claims.

    Returns:
        MessageResponse: Confirmation.

    Raises:
        HTTPException: If post not found, slug taken or reference missing.
    """
    try:
        post = service.update(post_id, data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    return MessageResponse(message="Post updated successfully")


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: int,
    service: Annotated[PostService, Depends(get_service)],
    admin: CurrentAdmin,
) -> MessageResponse:
    """Delete a post.

    Args:
        post_id: Post ID.
        service: Post service.
        admin: Verified admin token claims.

    Returns:
        MessageResponse: Confirmation.

    Raises:
        HTTPException: If post not found.
    """
    if not service.delete(post_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    return MessageResponse(message="Post deleted successfully")
