"""해싱 유틸리티"""
import hashlib


def hash_string(text: str) -> str:
    """
    문자열을 MD5 해시로 변환

    Args:
        text: 해시할 문자열

    Returns:
        MD5 해시 문자열
    """
    return hashlib.md5(text.encode()).hexdigest()


def generate_recent_searches_key(session_id: str) -> str:
    """
    세션 ID로 최근 검색어 캐시 키 생성

    세션 ID 원문은 Redis에 남기지 않습니다.

    Args:
        session_id: 클라이언트 세션 ID

    Returns:
        Redis 캐시 키
    """
    hashed = hash_string(session_id.strip())
    return f"recent_searches:{hashed}"
