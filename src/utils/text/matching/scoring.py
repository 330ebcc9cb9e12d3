"""Relevance scoring ladder for product titles."""

from __future__ import annotations

from fractions import Fraction
from math import floor
from typing import Any

from ..core.tokenize import split_words
from ..normalization.normalize import normalize_text
from .similarity import best_word_ratio


MIN_QUERY_LENGTH = 2

# 점수 구간: 상위 구간은 어떤 퍼지 매칭 조합으로도 넘을 수 없도록 간격을 둠
SCORE_EXACT = 1000
SCORE_PREFIX = 600
SCORE_SUBSTRING = 400
SCORE_FUZZY_SCALE = 200
SCORE_LOOSE = 100
SCORE_NONE = 0

FUZZY_THRESHOLD = Fraction(7, 10)


def _loose_word_match(title_words: list[str], query_words: list[str]) -> bool:
    # 검색어 단어마다: 어떤 상품명 단어에 포함되거나, 어떤 상품명 단어를 포함하면 통과
    if not query_words or not title_words:
        return False
    return all(
        any(qw in tw or tw in qw for tw in title_words)
        for qw in query_words
    )


def calculate_relevance_score(title: Any, query: Any) -> int:
    """상품명과 검색어의 관련도 점수

    우선순위 순으로 평가하여 처음 만족하는 규칙의 점수를 반환합니다.

    1. 완전 일치                      → 1000
    2. 상품명이 검색어로 시작          → 600
    3. 상품명이 검색어를 포함          → 400
    4. 단어쌍 최대 유사도 >= 0.70      → floor(유사도 * 200)  (140~200)
    5. 모든 검색어 단어가 상품명 단어와
       부분 포함 관계                  → 100
    6. 그 외                           → 0

    정규화된 검색어가 2글자 미만이면 항상 0 입니다.

    Args:
        title: 상품명 (문자열이 아니면 빈 문자열로 취급)
        query: 검색어

    Returns:
        int: 0 이상의 관련도 점수
    """
    normalized_query = normalize_text(query)
    if len(normalized_query) < MIN_QUERY_LENGTH:
        return SCORE_NONE

    normalized_title = normalize_text(title)

    if normalized_title == normalized_query:
        return SCORE_EXACT

    if normalized_title.startswith(normalized_query):
        return SCORE_PREFIX

    if normalized_query in normalized_title:
        return SCORE_SUBSTRING

    best = best_word_ratio(normalized_title, normalized_query)
    if best >= FUZZY_THRESHOLD:
        return floor(best * SCORE_FUZZY_SCALE)

    if _loose_word_match(split_words(normalized_title), split_words(normalized_query)):
        return SCORE_LOOSE

    return SCORE_NONE
