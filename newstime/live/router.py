"""Live stream API routes."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from newstime.dependencies import CurrentAdmin, get_db
from newstime.live.schemas import GoLiveRequest, LiveSettingsResponse, LiveSettingsUpdate
from newstime.live.service import LiveService
from newstime.schemas import MessageResponse

router = APIRouter()


def get_service(db: Annotated[Session, Depends(get_db)]) -> LiveService:
    """Get live service dependency."""
    return LiveService(db)


@router.get("", response_model=LiveSettingsResponse)
async def get_live_settings(
    service: Annotated[LiveService, Depends(get_service)],
) -> LiveSettingsResponse:
    """Get the live stream status, or the defaults if none was saved.

    Args:
        service: Live service.

    Returns:
        LiveSettingsResponse: Current status.
    """
    settings = service.get()
    if settings is None:
        return LiveSettingsResponse()
    return LiveSettingsResponse.model_validate(settings)


@router.put("", response_model=MessageResponse)
async def update_live_settings(
    data: LiveSettingsUpdate,
    service: Annotated[LiveService, Depends(get_service)],
    admin: CurrentAdmin,
) -> MessageResponse:
    """Replace the live stream status.

    Args:
        data: New settings.
        service: Live service.
        admin: Verified admin token claims.

    Returns:
        MessageResponse: Confirmation.
    """
    service.update(data)
    return MessageResponse(message="Live settings updated successfully")


@router.post("/go-live", response_model=MessageResponse)
async def go_live(
    service: Annotated[LiveService, Depends(get_service)],
    admin: CurrentAdmin,
    data: GoLiveRequest | None = None,
) -> MessageResponse:
    """Switch the live banner on.

    Args:
        service: Live service.
        admin: Verified admin token claims.
        data: Video id and title of the stream.

    Returns:
        MessageResponse: Confirmation.
    """
    data = data or GoLiveRequest()
    service.go_live(data.video_id, data.title)
    return MessageResponse(message="You are now live!")


@router.post("/end-live", response_model=MessageResponse)
async def end_live(
    service: Annotated[LiveService, Depends(get_service)],
    admin: CurrentAdmin,
) -> MessageResponse:
    """Switch the live banner off.

    Args:
        service: Live service.
        admin: Verified admin token claims.

    Returns:
        MessageResponse: Confirmation.
    """
    service.end_live()
    return MessageResponse(message="Live stream ended")
