"""Similarity helpers."""

from __future__ import annotations

from fractions import Fraction

from rapidfuzz.distance import Levenshtein

from ..core.tokenize import split_words


def levenshtein_distance(a: str, b: str) -> int:
    """두 문자열의 편집 거리 (삽입/삭제/치환 1회 = 1)."""
    return int(Levenshtein.distance(a or "", b or ""))


def _similarity_ratio(a: str, b: str) -> Fraction:
    max_len = max(len(a), len(b))
    if max_len == 0:
        return Fraction(1)
    return Fraction(max_len - levenshtein_distance(a, b), max_len)


def word_similarity(a: str, b: str) -> float:
    """두 단어의 유사도 (0.0~1.0).

    `(maxLen - editDistance) / maxLen` 로 정의하며,
    빈 문자열끼리는 1.0 입니다.
    """
    return float(_similarity_ratio(a or "", b or ""))


def best_word_ratio(title: str, query: str) -> Fraction:
    """모든 (상품명 단어, 검색어 단어) 쌍 중 최대 유사도 (정확한 분수).

    점수 구간 경계(0.70) 비교와 floor 계산에서 부동소수점 오차가
    끼어들지 않도록 Fraction으로 반환합니다.
    """
    best = Fraction(0)
    title_words = split_words(title)
    query_words = split_words(query)
    for tw in title_words:
        for qw in query_words:
            ratio = _similarity_ratio(tw, qw)
            if ratio > best:
                best = ratio
    return best


def best_word_similarity(title: str, query: str) -> float:
    """best_word_ratio의 float 버전 (정규화는 호출자 책임)."""
    return float(best_word_ratio(title, query))
