"""최근 검색어 엔드포인트"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path

from src.core.exceptions import CacheException, ValidationException
from src.core.logging import logger
from src.schemas.product_schema import RecentSearchRequest, RecentSearchResponse
from src.services.impl.recent_search_service import RecentSearchService

router = APIRouter(prefix="/api/v1/search/recent", tags=["recent-search"])

_recent_search_service: Optional[RecentSearchService] = None


def get_recent_search_service() -> RecentSearchService:
    """RecentSearchService 싱글톤

    Raises:
        HTTPException(503): Redis 연결 실패
    """
    global _recent_search_service
    if _recent_search_service is None:
        try:
            _recent_search_service = RecentSearchService()
        except CacheException as e:
            logger.warning(f"Recent search storage unavailable: {e.error_code}")
            raise HTTPException(status_code=503, detail="최근 검색어 저장소를 사용할 수 없습니다")
    return _recent_search_service


def get_optional_recent_search_service() -> Optional[RecentSearchService]:
    """RecentSearchService 싱글톤 (연결 실패 시 None, 헬스 체크용)"""
    try:
        return get_recent_search_service()
    except HTTPException:
        return None


def _unavailable(e: CacheException) -> HTTPException:
    logger.warning(f"Recent search storage error: {e.error_code}")
    return HTTPException(status_code=503, detail="최근 검색어 저장소를 사용할 수 없습니다")


@router.get("/{session_id}", response_model=RecentSearchResponse)
async def get_recent_searches(
    session_id: str = Path(..., min_length=1, max_length=128, description="세션 ID"),
    service: RecentSearchService = Depends(get_recent_search_service),
):
    """최근 검색어 조회 (최신순)"""
    try:
        searches = service.get(session_id)
    except CacheException as e:
        raise _unavailable(e)
    return RecentSearchResponse(session_id=session_id, searches=searches)


@router.post("/{session_id}", response_model=RecentSearchResponse)
async def add_recent_search(
    request: RecentSearchRequest,
    session_id: str = Path(..., min_length=1, max_length=128, description="세션 ID"),
    service: RecentSearchService = Depends(get_recent_search_service),
):
    """제출된 검색어 저장 (중복 시 맨 앞으로 이동)"""
    try:
        searches = service.add(session_id, request.query)
    except ValidationException as e:
        logger.warning(f"Validation error: {e.error_code}")
        raise HTTPException(status_code=400, detail=str(e))
    except CacheException as e:
        raise _unavailable(e)
    return RecentSearchResponse(session_id=session_id, searches=searches)


@router.delete("/{session_id}", response_model=RecentSearchResponse)
async def clear_recent_searches(
    session_id: str = Path(..., min_length=1, max_length=128, description="세션 ID"),
    service: RecentSearchService = Depends(get_recent_search_service),
):
    """최근 검색어 전체 삭제"""
    try:
        service.clear(session_id)
    except CacheException as e:
        raise _unavailable(e)
    return RecentSearchResponse(session_id=session_id, searches=[])
