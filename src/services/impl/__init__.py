"""Services implementation package."""

from .recent_search_service import RecentSearchService
from .search_service import ProductSearchService, create_search_results

__all__ = ["RecentSearchService", "ProductSearchService", "create_search_results"]
