"""Live stream status."""

from newstime.live.router import router

__all__ = ["router"]
