"""헬스 체크 엔드포인트"""
from typing import Optional

from fastapi import APIRouter, Depends
from datetime import datetime

from src.core.exceptions import CacheException, ProductFetchException
from src.core.logging import logger
from src.repositories.impl.product_repository import ProductRepository
from src.services.impl.recent_search_service import RecentSearchService
from src.api.routes.search_routes import get_product_repository
from src.api.routes.recent_search_routes import get_optional_recent_search_service
from src.schemas.product_schema import HealthResponse
from src import __version__

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    repository: ProductRepository = Depends(get_product_repository),
    recent_search_service: Optional[RecentSearchService] = Depends(get_optional_recent_search_service),
):
    """
    헬스 체크 엔드포인트

    - 서버 상태
    - 카탈로그 로드 상태
    - Redis(최근 검색어) 연결 상태
    """
    catalog_ok = False
    redis_ok = False

    # 카탈로그 체크
    try:
        repository.list_products()
        catalog_ok = True
    except ProductFetchException as e:
        logger.warning(f"Catalog unavailable: {e.error_code}")

    # Redis 체크
    if recent_search_service is not None:
        try:
            redis_ok = recent_search_service.health_check()
        except CacheException as e:
            logger.warning(f"Cache connection failed: {e.error_code}")
        except Exception as e:
            logger.error(f"Unexpected cache error: {e}")

    status = "ok" if catalog_ok and redis_ok else ("degraded" if catalog_ok or redis_ok else "error")

    return HealthResponse(
        status=status,
        timestamp=datetime.now(),
        version=__version__
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": "상품 검색 서비스",
        "version": __version__,
        "docs": "/docs"
    }
