"""Matching package (similarity + relevance scoring)."""

from .scoring import MIN_QUERY_LENGTH, calculate_relevance_score
from .similarity import (
    best_word_ratio,
    best_word_similarity,
    levenshtein_distance,
    word_similarity,
)

__all__ = [
    "MIN_QUERY_LENGTH",
    "calculate_relevance_score",
    "best_word_ratio",
    "best_word_similarity",
    "levenshtein_distance",
    "word_similarity",
]
