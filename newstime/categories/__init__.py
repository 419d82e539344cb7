"""Categories module for grouping news posts."""

from newstime.categories.router import router
from newstime.categories.schemas import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
)

__all__ = [
    "router",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
]
