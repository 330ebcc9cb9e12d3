"""API 엔드포인트 패키지 - export only."""

from .routes import (
    health_router,
    search_router,
    recent_search_router,
    get_product_repository,
    get_search_service,
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
