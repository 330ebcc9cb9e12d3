"""Engine Layer - Product ranking and incremental search

This module provides the core engine layer for product search, implementing:
- search_products / rank_candidates: Scored relevance ranking
- filter_products_by_search: Literal substring filter for listing pages
- SearchOptions: Ranking configuration per call site
- Debouncer: Cancellable single-shot timer
- IncrementalSearchController: Per-widget debounced search state machine
- SearchOutcome / SearchState: Widget display snapshot
"""

from .controller import IncrementalSearchController
from .debounce import Debouncer
from .options import SearchContext, SearchOptions
from .ranker import (
    ScoredCandidate,
    filter_products_by_search,
    rank_candidates,
    search_products,
)
from .result import SearchOutcome, SearchState

__all__ = [
    "IncrementalSearchController",
    "Debouncer",
    "SearchContext",
    "SearchOptions",
    "ScoredCandidate",
    "filter_products_by_search",
    "rank_candidates",
    "search_products",
    "SearchOutcome",
    "SearchState",
]
