"""API routes package."""

from .health_routes import router as health_router
from .search_routes import router as search_router, get_product_repository, get_search_service
from .recent_search_routes import (
    router as recent_search_router,
    get_recent_search_service,
    get_optional_recent_search_service,
)

__all__ = [
    "health_router",
    "search_router",
    "recent_search_router",
    "get_product_repository",
    "get_search_service",
    "get_recent_search_service",
    "get_optional_recent_search_service",
]
