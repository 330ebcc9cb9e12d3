"""Redis 최근 검색어 서비스 - 세션별 최근 검색어 저장만 담당"""
import json
from typing import Optional
from redis import Redis

from src.core.config import settings
from src.core.logging import logger, sanitize_for_log
from src.core.exceptions import (
    CacheConnectionException,
    CacheSerializationException,
    InvalidQueryException,
)
from src.utils.hash_utils import generate_recent_searches_key


MAX_QUERY_LENGTH = 200


class RecentSearchService:
    """세션별 최근 검색어 관리 서비스

    - 최신순, 중복 없음 (다시 검색하면 맨 앞으로 이동)
    - 최대 settings.recent_searches_max개
    - JSON 리스트로 저장, TTL 적용
    """

    def __init__(self, redis_client: Optional[Redis] = None, max_entries: Optional[int] = None):
        """Redis 클라이언트 초기화"""
        self.max_entries = max_entries or settings.recent_searches_max
        if redis_client is not None:
            self.redis_client = redis_client
            return

        try:
            self.redis_client = Redis.from_url(
                settings.redis_url,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5
            )
            # 연결 테스트
            self.redis_client.ping()
            logger.info("Redis connection established")
        except Exception as e:
            logger.error(f"Failed to connect to Redis: {e}")
            raise CacheConnectionException(str(e))

    def get(self, session_id: str) -> list[str]:
        """
        최근 검색어 조회

        저장된 값이 손상된 경우 빈 목록으로 취급합니다.

        Args:
            session_id: 세션 ID

        Returns:
            최신순 검색어 목록
        """
        cache_key = generate_recent_searches_key(session_id)
        try:
            cached_data = self.redis_client.get(cache_key)
        except Exception as e:
            logger.error(f"Recent searches read error: {e}")
            raise CacheConnectionException(str(e), {"key": cache_key})

        if not cached_data:
            return []

        try:
            data = json.loads(cached_data)
        except (json.JSONDecodeError, TypeError) as e:
            logger.error(f"Failed to load recent searches: {e}")
            return []

        if not isinstance(data, list):
            logger.error(f"Recent searches payload is not a list: key={cache_key}")
            return []

        return [s for s in data if isinstance(s, str) and s][: self.max_entries]

    def add(self, session_id: str, query: str) -> list[str]:
        """
        검색어 저장 (맨 앞에 추가, 중복 제거, 최대 개수 유지)

        Args:
            session_id: 세션 ID
            query: 제출된 검색어

        Returns:
            갱신된 최신순 검색어 목록

        Raises:
            InvalidQueryException: 너무 길거나 NUL 문자가 포함된 검색어
        """
        query = (query or "").strip()
        if not query:
            return self.get(session_id)
        if len(query) > MAX_QUERY_LENGTH:
            raise InvalidQueryException(f"longer than {MAX_QUERY_LENGTH} characters")
        if "\0" in query:
            raise InvalidQueryException("contains NUL character")

        updated = [query] + [s for s in self.get(session_id) if s != query]
        updated = updated[: self.max_entries]
        self._save(session_id, updated)
        logger.info(f"Recent search saved: query='{sanitize_for_log(query)}', total={len(updated)}")
        return updated

    def clear(self, session_id: str) -> bool:
        """
        최근 검색어 전체 삭제

        Returns:
            삭제된 항목이 있었는지 여부
        """
        cache_key = generate_recent_searches_key(session_id)
        try:
            result = self.redis_client.delete(cache_key)
        except Exception as e:
            logger.error(f"Recent searches delete error: {e}")
            raise CacheConnectionException(str(e), {"key": cache_key})
        return bool(result)

    def health_check(self) -> bool:
        """Redis 연결 상태 확인"""
        try:
            return bool(self.redis_client.ping())
        except Exception as e:
            logger.warning(f"Redis health check failed: {e}")
            return False

    def _save(self, session_id: str, searches: list[str]) -> None:
        cache_key = generate_recent_searches_key(session_id)
        try:
            cached_value = json.dumps(searches, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize recent searches: {e}")
            raise CacheSerializationException("serialize", str(e))

        try:
            self.redis_client.setex(cache_key, settings.recent_searches_ttl, cached_value)
        except Exception as e:
            logger.error(f"Recent searches write error: {e}")
            raise CacheConnectionException(str(e), {"key": cache_key})
