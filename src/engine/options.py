"""Search Options - Ranking configuration per call site

호출 위치별 기본값:
- NAVBAR: 상단 검색창 자동완성 (6개)
- SMART: 상품 검색 위젯 (8개)
- DEFAULT: 일반 검색 (10개)

min_score 기본값은 100 (느슨한 매칭 구간 이상만 허용).
"""

from dataclasses import dataclass
from enum import Enum

from src.core.config import settings


class SearchContext(str, Enum):
    """검색 호출 위치"""

    NAVBAR = "navbar"
    SMART = "smart"
    DEFAULT = "default"


@dataclass(frozen=True)
class SearchOptions:
    """랭킹 설정

    Attributes:
        limit: 최대 결과 개수 (> 0)
        min_score: 최소 관련도 점수 (>= 0)
    """

    limit: int = 10
    min_score: int = 100

    def __post_init__(self):
        """설정 검증"""
        if self.limit <= 0:
            raise ValueError(f"limit must be positive (got {self.limit})")
        if self.min_score < 0:
            raise ValueError(f"min_score must be >= 0 (got {self.min_score})")

    @classmethod
    def for_context(cls, context: SearchContext) -> "SearchOptions":
        """호출 위치별 기본 설정 생성

        Args:
            context: 검색 호출 위치

        Returns:
            SearchOptions: settings 기반 기본값
        """
        limits = {
            SearchContext.NAVBAR: settings.search_navbar_limit,
            SearchContext.SMART: settings.search_smart_limit,
            SearchContext.DEFAULT: settings.search_default_limit,
        }
        return cls(
            limit=limits[SearchContext(context)],
            min_score=settings.search_default_min_score,
        )
