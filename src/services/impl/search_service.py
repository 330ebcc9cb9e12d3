"""상품 검색 서비스 - 자동완성 결과 구성과 목록 필터링"""
from typing import Callable, Optional, Sequence

from src.core.exceptions import ProductFetchException
from src.core.logging import logger, sanitize_for_log
from src.engine import (
    SearchContext,
    SearchOptions,
    filter_products_by_search,
    search_products,
)
from src.repositories.impl.product_repository import ProductRepository
from src.schemas.product_schema import Product, SearchResultItem


UNKNOWN_CATEGORY_NAME = "دسته‌بندی نامشخص"


def create_search_results(
    products: Sequence[Product],
    query: str,
    category_getter: Callable[[Optional[str]], str],
    limit: int = 8,
    min_score: Optional[int] = None,
) -> list[SearchResultItem]:
    """
    드롭다운 표시용 검색 결과 생성

    관련도 순으로 랭킹한 뒤 카테고리명을 붙여 표시용 모델로 변환합니다.
    카테고리는 표시용일 뿐 점수에는 영향을 주지 않습니다.

    Args:
        products: 상품 목록
        query: 검색어
        category_getter: 카테고리 ID → 카테고리명
        limit: 최대 결과 개수
        min_score: 최소 관련도 점수 (기본값: SearchOptions 기본값)

    Returns:
        SearchResultItem 목록
    """
    options = SearchOptions(limit=limit) if min_score is None else SearchOptions(limit=limit, min_score=min_score)
    ranked = search_products(products, query, options)

    return [
        SearchResultItem(
            id=str(product.id),
            title=product.title,
            image_url=product.image_url,
            category=category_getter(product.category_id),
            price=product.price,
            description=product.description,
        )
        for product in ranked
    ]


class ProductSearchService:
    """카탈로그 기반 상품 검색 서비스

    상품 목록 로딩에 실패하면 빈 목록으로 검색하여 빈 결과를 반환합니다.
    """

    def __init__(self, repository: ProductRepository):
        if repository is None:
            raise ValueError("repository must not be None")
        self.repository = repository

    def category_name(self, category_id: Optional[str]) -> str:
        """카테고리명 조회 (없으면 UNKNOWN_CATEGORY_NAME)"""
        try:
            name = self.repository.get_category_name(category_id)
        except ProductFetchException:
            return UNKNOWN_CATEGORY_NAME
        return name or UNKNOWN_CATEGORY_NAME

    def suggest(
        self,
        query: str,
        context: SearchContext = SearchContext.NAVBAR,
        limit: Optional[int] = None,
    ) -> list[SearchResultItem]:
        """
        자동완성 검색

        Args:
            query: 검색어
            context: 호출 위치 (기본 limit 결정)
            limit: 최대 결과 개수 (지정 시 context 기본값 대신 사용)

        Returns:
            SearchResultItem 목록
        """
        options = SearchOptions.for_context(context)
        results = create_search_results(
            self._products(),
            query,
            self.category_name,
            limit=limit or options.limit,
            min_score=options.min_score,
        )
        logger.info(f"Suggest: query='{sanitize_for_log(query)}', results={len(results)}")
        return results

    def list_products(self, search: Optional[str] = None) -> list[Product]:
        """
        상품 목록 (검색어가 있으면 문자 그대로 필터)

        Args:
            search: 필터 검색어

        Returns:
            원래 순서의 상품 목록
        """
        products = self._products()
        if not search:
            return products
        return filter_products_by_search(products, search)

    def _products(self) -> list[Product]:
        try:
            return self.repository.list_products()
        except ProductFetchException as e:
            logger.warning(f"Searching with empty catalog: {e.error_code}")
            return []
