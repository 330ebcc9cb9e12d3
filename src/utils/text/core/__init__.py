"""Core text processing (coercion, tokenization)."""

from .cleaning import coerce_text
from .tokenize import split_words

__all__ = [
    "coerce_text",
    "split_words",
]
