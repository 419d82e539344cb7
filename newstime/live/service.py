"""Live stream status service."""

import logging

from sqlalchemy.orm import Session

from newstime.db.models import DEFAULT_LIVE_TITLE, LIVE_SETTINGS_ID, LiveSettings
from newstime.live.schemas import LiveSettingsUpdate

logger = logging.getLogger(__name__)


class LiveService:
    """Reads and writes the single live-settings row."""

    def __init__(self, db: Session):
        self.db = db

    def get(self) -> LiveSettings | None:
        """Get the live settings row, None if never saved."""
        return self.db.get(LiveSettings, LIVE_SETTINGS_ID)

    def _get_or_create(self) -> LiveSettings:
        settings = self.get()
        if settings is None:
            settings = LiveSettings(
                id=LIVE_SETTINGS_ID,
                channel_id="",
                live_video_id="",
                live_url="",
                is_live=False,
                live_title=DEFAULT_LIVE_TITLE,
            )
            self.db.add(settings)
        return settings

    def update(self, data: LiveSettingsUpdate) -> LiveSettings:
        """Replace the live settings, creating the row if needed.

        Missing string fields reset to their defaults.

        Args:
            data: New settings.

        Returns:
            LiveSettings: Saved settings.
        """
        settings = self._get_or_create()
        settings.channel_id = data.channel_id or ""
        settings.live_video_id = data.live_video_id or ""
        settings.live_url = data.live_url or ""
        settings.is_live = data.is_live
        settings.live_title = data.live_title or DEFAULT_LIVE_TITLE
        self.db.commit()
        self.db.refresh(settings)
        return settings

    def go_live(self, video_id: str | None, title: str | None) -> LiveSettings:
        """Switch the live banner on for a video.

        Args:
            video_id: YouTube video id of the stream.
            title: Banner title.

        Returns:
            LiveSettings: Saved settings.
        """
        settings = self._get_or_create()
        settings.live_video_id = video_id or ""
        settings.live_title = title or DEFAULT_LIVE_TITLE
        settings.is_live = True
        self.db.commit()
        self.db.refresh(settings)
        logger.info(f"Live stream started for video '{settings.live_video_id}'")
        return settings

    def end_live(self) -> LiveSettings:
        """Switch the live banner off.

        Returns:
            LiveSettings: Saved settings.
        """
        settings = self._get_or_create()
        settings.is_live = False
        self.db.commit()
        self.db.refresh(settings)
        logger.info("Live stream ended")
        return settings
