"""Ranker / Filter - Scored ranking and literal filtering over a product collection

- rank_candidates / search_products: 점수 계산 → min_score 필터 → 안정 정렬 → limit
- filter_products_by_search: 정규화 + 상품명 부분 문자열 포함만 (퍼지 매칭 없음)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Sequence, TypeVar

from src.utils.text import MIN_QUERY_LENGTH, calculate_relevance_score, normalize_text

from .options import SearchOptions


P = TypeVar("P")


@dataclass(frozen=True)
class ScoredCandidate:
    """한 번의 랭킹 동안만 존재하는 (상품, 점수) 쌍"""

    product: Any
    score: int


def product_title(product: Any) -> Any:
    """상품 레코드에서 상품명 추출 (객체 속성 또는 dict 키)"""
    if isinstance(product, Mapping):
        return product.get("title")
    return getattr(product, "title", None)


def _is_searchable_query(query: Any) -> bool:
    if not isinstance(query, str):
        return False
    return len(query.strip()) >= MIN_QUERY_LENGTH


def rank_candidates(
    products: Sequence[P],
    query: str,
    options: Optional[SearchOptions] = None,
) -> list[ScoredCandidate]:
    """점수가 포함된 랭킹 결과

    Args:
        products: 상품 목록 (읽기 전용)
        query: 검색어
        options: limit/min_score 설정 (기본값: SearchOptions())

    Returns:
        list[ScoredCandidate]: 점수 내림차순 (동점은 입력 순서 유지), 최대 limit개
    """
    options = options or SearchOptions()

    # 짧은 검색어는 점수 계산 자체를 생략
    if not _is_searchable_query(query) or not products:
        return []

    scored = [
        ScoredCandidate(product=product, score=calculate_relevance_score(product_title(product), query))
        for product in products
    ]
    matched = [c for c in scored if c.score >= options.min_score]

    # sorted()는 안정 정렬 → 동점은 원래 순서 유지
    matched = sorted(matched, key=lambda c: c.score, reverse=True)
    return matched[: options.limit]


def search_products(
    products: Sequence[P],
    query: str,
    options: Optional[SearchOptions] = None,
) -> list[P]:
    """관련도 순 상품 검색 (자동완성용)

    Args:
        products: 상품 목록
        query: 검색어
        options: limit/min_score 설정

    Returns:
        list: 관련도 내림차순 상품 목록
    """
    return [c.product for c in rank_candidates(products, query, options)]


def filter_products_by_search(products: Sequence[P], query: str) -> list[P]:
    """상품 목록 페이지용 문자 그대로의 필터

    정규화된 상품명이 정규화된 검색어를 포함하는 상품만 원래 순서대로 반환합니다.
    퍼지 매칭/점수/개수 제한은 없습니다.
    검색어가 비어 있거나 2글자 미만이면 전체 목록을 그대로 반환합니다.

    Args:
        products: 상품 목록
        query: 검색어

    Returns:
        list: 필터링된 상품 목록
    """
    normalized_query = normalize_text(query)
    if len(normalized_query) < MIN_QUERY_LENGTH:
        return list(products)

    return [
        product for product in products
        if normalized_query in normalize_text(product_title(product))
    ]
