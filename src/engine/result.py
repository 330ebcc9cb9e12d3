"""Search Result - Widget state and display snapshot

Provides the state machine states and a snapshot format for incremental search widgets.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class SearchState(str, Enum):
    """검색 위젯 상태

    IDLE → DEBOUNCING → QUERYING → DISPLAYING_*
    IDLE은 초기 상태이자 clear 후 상태입니다.
    """

    IDLE = "idle"
    DEBOUNCING = "debouncing"  # 타이머 대기 중
    QUERYING = "querying"  # 랭킹 실행 중
    DISPLAYING_RESULTS = "displaying_results"  # 결과 표시
    DISPLAYING_EMPTY = "displaying_empty"  # 결과 없음 표시
    DISPLAYING_ERROR = "displaying_error"  # 상품 목록 로딩 실패


@dataclass
class SearchOutcome:
    """검색 위젯이 화면에 전달하는 스냅샷

    Attributes:
        state: 현재 상태
        query: 상태를 만든 검색어
        results: 표시할 상품 목록 (표시 상태가 아니면 빈 목록)
        elapsed_ms: 랭킹 소요 시간 (밀리초)
        error_message: 오류 메시지
    """

    state: SearchState
    query: Optional[str] = None
    results: list[Any] = field(default_factory=list)
    elapsed_ms: Optional[float] = None
    error_message: Optional[str] = None

    @property
    def is_displaying(self) -> bool:
        """표시 상태 여부"""
        return self.state in [
            SearchState.DISPLAYING_RESULTS,
            SearchState.DISPLAYING_EMPTY,
            SearchState.DISPLAYING_ERROR,
        ]

    @property
    def is_error(self) -> bool:
        """오류 여부"""
        return self.state == SearchState.DISPLAYING_ERROR

    @classmethod
    def idle(cls) -> "SearchOutcome":
        return cls(state=SearchState.IDLE)

    @classmethod
    def debouncing(cls, query: str) -> "SearchOutcome":
        return cls(state=SearchState.DEBOUNCING, query=query)

    @classmethod
    def querying(cls, query: str) -> "SearchOutcome":
        return cls(state=SearchState.QUERYING, query=query)

    @classmethod
    def from_results(cls, query: str, results: list[Any], elapsed_ms: float) -> "SearchOutcome":
        """랭킹 결과로 표시 상태 생성

        결과가 비어 있으면 DISPLAYING_EMPTY (오류가 아닌 정상 상태)

        Args:
            query: 검색어
            results: 랭킹 결과
            elapsed_ms: 소요 시간 (밀리초)

        Returns:
            SearchOutcome: DISPLAYING_RESULTS 또는 DISPLAYING_EMPTY
        """
        state = SearchState.DISPLAYING_RESULTS if results else SearchState.DISPLAYING_EMPTY
        return cls(state=state, query=query, results=list(results), elapsed_ms=elapsed_ms)

    @classmethod
    def error(cls, query: str, error: str) -> "SearchOutcome":
        """상품 목록 로딩 실패 상태 생성"""
        return cls(state=SearchState.DISPLAYING_ERROR, query=query, error_message=error)
