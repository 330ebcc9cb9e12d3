"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # Redis (최근 검색어 저장소)
    redis_url: str = "redis://localhost:6379/0"
    recent_searches_ttl: int = 2592000  # 30일
    recent_searches_max: int = 5

    # 디바운스 (밀리초)
    # - search_debounce_ms: 자동완성 랭킹
    # - search_submit_debounce_ms: 검색 페이지 이동(submit)
    search_debounce_ms: int = 300
    search_submit_debounce_ms: int = 500

    # 호출 위치별 결과 개수
    search_navbar_limit: int = 6
    search_smart_limit: int = 8
    search_default_limit: int = 10
    search_default_min_score: int = 100

    # 카탈로그 리소스 (resources/ 기준 상대 경로)
    catalog_resource: str = "catalog/products.yaml"

    # API
    api_title: str = "상품 검색 서비스"
    api_version: str = "1.0.0"
    api_description: str = "페르시아어 상품명 정규화와 퍼지 매칭 기반의 상품 검색 API"

    # 로깅
    log_level: str = "INFO"

    @field_validator("recent_searches_ttl", "recent_searches_max")
    @classmethod
    def validate_recent_searches(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("recent search settings must be positive")
        return v

    @field_validator("search_debounce_ms", "search_submit_debounce_ms")
    @classmethod
    def validate_debounce(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("debounce delay must be positive")
        return v

    @field_validator("search_navbar_limit", "search_smart_limit", "search_default_limit")
    @classmethod
    def validate_limits(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("search limits must be positive")
        return v

    @field_validator("search_default_min_score")
    @classmethod
    def validate_min_score(cls, v: int) -> int:
        if v < 0:
            raise ValueError("search_default_min_score must be >= 0")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
