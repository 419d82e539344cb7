"""YouTube videos API routes."""

import logging

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy.orm import Session

from newstime.db.models import YouTubeVideo
from newstime.dependencies import CurrentAdmin, DbSession
from newstime.schemas import CreatedResponse, MessageResponse
from newstime.youtube.schemas import (
    THUMBNAIL_URL_TEMPLATE,
    VideoCreate,
    VideoResponse,
    VideoUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_video_or_404(db: Session, video_pk: int) -> YouTubeVideo:
    video = db.query(YouTubeVideo).filter(YouTubeVideo.id == video_pk).first()
    if not video:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Video not found",
        )
    return video


@router.get("", response_model=list[VideoResponse])
async def list_videos(
    db: DbSession,
    category: str | None = Query(None, description="Video category"),
    limit: int = Query(20, ge=1, le=100),
) -> list[VideoResponse]:
    """List videos that are not live streams.

    Args:
        db: Database session.
        category: Category filter.
        limit: Maximum number of videos.

    Returns:
        list[VideoResponse]: Videos by display order, newest first within an order.
    """
    query = db.query(YouTubeVideo).filter(YouTubeVideo.is_live.is_(False))
    if category:
        query = query.filter(YouTubeVideo.category == category)

    videos = (
        query.order_by(
            YouTubeVideo.display_order.asc(),
            YouTubeVideo.created_at.desc(),
            YouTubeVideo.id.desc(),
        )
        .limit(limit)
        .all()
    )
    return [VideoResponse.model_validate(v) for v in videos]


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_video(
    data: VideoCreate,
    db: DbSession,
    admin: CurrentAdmin,
) -> CreatedResponse:
    """Add a video.

    The thumbnail defaults to YouTube's max-resolution still.

    Args:
        data: Video data.
        db: Database session.
        admin: Verified admin token claims.

    Returns:
        CreatedResponse: New video id.
    """
    video = YouTubeVideo(
        video_id=data.video_id,
        title=data.title,
        description=data.description,
        thumbnail=data.thumbnail or THUMBNAIL_URL_TEMPLATE.format(video_id=data.video_id),
        category=data.category,
        views=data.views,
        display_order=data.display_order,
    )
    db.add(video)
    db.commit()
    db.refresh(video)

    logger.info(f"Added YouTube video {video.video_id} as {video.id}")
    return CreatedResponse(id=video.id, message="Video added successfully")


@router.put("/{video_pk}", response_model=MessageResponse)
async def update_video(
    video_pk: int,
    data: VideoUpdate,
    db: DbSession,
    admin: CurrentAdmin,
) -> MessageResponse:
    """Update a video.

    Args:
        video_pk: Row ID of the video.
        data: Fields to change.
        db: Database session.
        admin: Verified admin token claims.

    Returns:
        MessageResponse: Confirmation.

    Raises:
        HTTPException: If video not found.
    """
    video = _get_video_or_404(db, video_pk)

    for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(video, field, value)

    db.commit()
    return MessageResponse(message="Video updated successfully")


@router.delete("/{video_pk}", response_model=MessageResponse)
async def delete_video(
    video_pk: int,
    db: DbSession,
    admin: CurrentAdmin,
) -> MessageResponse:
    """Delete a video.

    Args:
        video_pk: Row ID of the video.
        db: Database session.
        admin: Verified admin token claims.

    Returns:
        MessageResponse: Confirmation.

    Raises:
        HTTPException: If video not found.
    """
    video = _get_video_or_404(db, video_pk)
    db.delete(video)
    db.commit()
    return MessageResponse(message="Video deleted successfully")
