"""Tokenization utilities for matching."""

from __future__ import annotations


def split_words(text: str) -> list[str]:
    """공백 기준 단어 분리.

    연속 공백/탭/개행은 하나의 구분자로 취급하며 빈 토큰은 만들지 않습니다.
    """
    if not text:
        return []
    return text.split()
