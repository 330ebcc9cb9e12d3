"""Search Routes - 자동완성 검색 / 상품 목록 필터

HTTP Layer는 서비스 계층으로 요청을 위임하는 단순한 Translator 역할만 수행합니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from src.core.logging import logger, sanitize_for_log
from src.engine import SearchContext
from src.repositories.impl.product_repository import ProductRepository
from src.schemas.product_schema import ProductListResponse, SearchSuggestResponse
from src.services.impl.search_service import ProductSearchService

router = APIRouter(prefix="/api/v1", tags=["search"])

# 싱글톤 서비스
_product_repository: Optional[ProductRepository] = None
_search_service: Optional[ProductSearchService] = None


def get_product_repository() -> ProductRepository:
    """ProductRepository 싱글톤"""
    global _product_repository
    if _product_repository is None:
        _product_repository = ProductRepository()
    return _product_repository


def get_search_service(
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductSearchService:
    """ProductSearchService 싱글톤"""
    global _search_service
    if _search_service is None:
        _search_service = ProductSearchService(repository)
    return _search_service


@router.get("/search/suggest", response_model=SearchSuggestResponse)
async def suggest(
    q: str = Query("", max_length=200, description="검색어"),
    context: SearchContext = Query(SearchContext.NAVBAR, description="호출 위치"),
    limit: Optional[int] = Query(None, ge=1, le=50, description="최대 결과 개수"),
    service: ProductSearchService = Depends(get_search_service),
):
    """자동완성 검색 API

    2글자 미만 검색어는 랭킹 없이 빈 결과를 반환합니다.
    """
    logger.debug(f"[API] Suggest request: q='{sanitize_for_log(q)}', context={context.value}")
    results = service.suggest(q, context=context, limit=limit)
    return SearchSuggestResponse(query=q, results=results, total=len(results))


@router.get("/products", response_model=ProductListResponse)
async def list_products(
    search: Optional[str] = Query(None, max_length=200, description="상품명 필터"),
    service: ProductSearchService = Depends(get_search_service),
):
    """상품 목록 API (상품명 부분 문자열 필터, 퍼지 매칭 없음)"""
    products = service.list_products(search)
    return ProductListResponse(search=search, products=products, total=len(products))
