"""비즈니스 로직 서비스 - export only."""

from .impl import ProductSearchService, RecentSearchService, create_search_results

__all__ = ["ProductSearchService", "RecentSearchService", "create_search_results"]
