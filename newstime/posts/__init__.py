"""Posts module for news articles."""

from newstime.posts.router import router
from newstime.posts.schemas import PostCreate, PostResponse, PostUpdate
from newstime.posts.service import PostService

__all__ = [
    "router",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "PostService",
]
