"""Text utilities (modularized).

Public API is organized under:
- core/
- matching/
- normalization/
"""

from .core.cleaning import coerce_text
from .core.tokenize import split_words
from .matching import (
    MIN_QUERY_LENGTH,
    best_word_similarity,
    calculate_relevance_score,
    levenshtein_distance,
    word_similarity,
)
from .normalization import normalize_text

__all__ = [
    # core
    "coerce_text",
    "split_words",
    # matching
    "MIN_QUERY_LENGTH",
    "calculate_relevance_score",
    "best_word_similarity",
    "levenshtein_distance",
    "word_similarity",
    # normalization
    "normalize_text",
]
