"""YouTube video references shown on the public site."""

from newstime.youtube.router import router

__all__ = ["router"]
