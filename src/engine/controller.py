"""Incremental Search Controller - Debounced search for one search widget

Owns the per-widget state machine:
1. IDLE → DEBOUNCING (keystroke, timer restarted)
2. DEBOUNCING → QUERYING (timer fired)
3. QUERYING → DISPLAYING_RESULTS | DISPLAYING_EMPTY | DISPLAYING_ERROR

The pending debounce timer is the only cancellable unit. It is cancelled on
every new keystroke, on clear() and on close().
"""

from time import perf_counter
from typing import Any, Callable, Optional, Sequence

from src.core.config import settings
from src.core.exceptions import ProductFetchException, SearchControllerClosedException
from src.core.logging import logger, sanitize_for_log
from src.utils.text import MIN_QUERY_LENGTH

from .debounce import Debouncer
from .options import SearchContext, SearchOptions
from .ranker import filter_products_by_search, search_products
from .result import SearchOutcome, SearchState


ProductProvider = Callable[[], Sequence[Any]]
SearchFunction = Callable[[Sequence[Any], str, SearchOptions], list]
ChangeListener = Callable[[SearchOutcome], None]
SubmitListener = Callable[[str], None]


def _filter_search(products: Sequence[Any], query: str, options: SearchOptions) -> list:
    return filter_products_by_search(products, query)


class IncrementalSearchController:
    """검색 위젯 하나의 디바운스 검색 상태 관리자

    위젯 생성(mount) 시 만들고 종료(unmount) 시 close()로 정리합니다.
    타이머 핸들은 모듈 전역이 아닌 인스턴스가 소유합니다.

    Usage:
        async with IncrementalSearchController(repository.list_products) as controller:
            controller.on_input("کاسه")
            ...
            controller.outcome.results
    """

    def __init__(
        self,
        product_provider: ProductProvider,
        *,
        options: Optional[SearchOptions] = None,
        delay_ms: Optional[int] = None,
        search_fn: SearchFunction = search_products,
        on_change: Optional[ChangeListener] = None,
        on_submit: Optional[SubmitListener] = None,
    ):
        """
        Args:
            product_provider: 현재 메모리의 상품 목록을 반환하는 함수
                (로딩 실패 시 ProductFetchException)
            options: 랭킹 설정 (기본값: SearchOptions())
            delay_ms: 디바운스 지연 (기본값: settings.search_debounce_ms)
            search_fn: (products, query, options) -> 결과 목록
            on_change: 상태 변경 시 호출
            on_submit: submit() 시 검색어와 함께 호출 (최근 검색어 저장 등)
        """
        if product_provider is None:
            raise ValueError("product_provider must not be None")

        delay_ms = settings.search_debounce_ms if delay_ms is None else delay_ms
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0 (got {delay_ms})")

        self.product_provider = product_provider
        self.options = options or SearchOptions()
        self.delay_ms = delay_ms
        self._search_fn = search_fn
        self._on_change = on_change
        self._on_submit = on_submit

        self._debouncer = Debouncer(delay_ms / 1000, self._run_search)
        self._query = ""
        self._outcome = SearchOutcome.idle()
        self._closed = False

    @classmethod
    def for_autocomplete(
        cls,
        product_provider: ProductProvider,
        context: SearchContext = SearchContext.NAVBAR,
        **kwargs: Any,
    ) -> "IncrementalSearchController":
        """자동완성(관련도 랭킹) 위젯용 컨트롤러"""
        kwargs.setdefault("options", SearchOptions.for_context(context))
        return cls(product_provider, search_fn=search_products, **kwargs)

    @classmethod
    def for_listing(
        cls,
        product_provider: ProductProvider,
        **kwargs: Any,
    ) -> "IncrementalSearchController":
        """상품 목록 페이지(문자 그대로 필터) 위젯용 컨트롤러"""
        kwargs.setdefault("delay_ms", settings.search_submit_debounce_ms)
        return cls(product_provider, search_fn=_filter_search, **kwargs)

    # ------------------------------------------------------------------
    # 상태 조회
    # ------------------------------------------------------------------

    @property
    def state(self) -> SearchState:
        return self._outcome.state

    @property
    def outcome(self) -> SearchOutcome:
        return self._outcome

    @property
    def query(self) -> str:
        return self._query

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def has_pending_search(self) -> bool:
        """대기 중인 디바운스 타이머 존재 여부"""
        return self._debouncer.pending

    # ------------------------------------------------------------------
    # 이벤트
    # ------------------------------------------------------------------

    def on_input(self, value: str) -> None:
        """키 입력 처리

        이전 타이머를 취소하고, 검색어가 2글자 이상이면 새 타이머를 예약합니다.
        2글자 미만이면 랭킹 없이 IDLE로 돌아갑니다.

        Args:
            value: 입력창의 현재 값

        Raises:
            SearchControllerClosedException: close() 이후 호출된 경우
        """
        self._ensure_open("on_input")

        self._query = value if isinstance(value, str) else ""
        self._debouncer.cancel()

        if len(self._query.strip()) < MIN_QUERY_LENGTH:
            self._set_outcome(SearchOutcome.idle())
            return

        self._debouncer.trigger(self._query)
        self._set_outcome(SearchOutcome.debouncing(self._query))

    def clear(self) -> None:
        """입력/결과 초기화 (대기 중인 타이머 취소)"""
        self._ensure_open("clear")
        self._debouncer.cancel()
        self._query = ""
        self._set_outcome(SearchOutcome.idle())

    def submit(self) -> Optional[str]:
        """검색 제출 (검색 페이지 이동)

        대기 중인 타이머를 취소하고 제출 리스너에 검색어를 전달한 뒤 초기화합니다.

        Returns:
            Optional[str]: 제출된 검색어 (공백이면 None, 상태 변화 없음)
        """
        self._ensure_open("submit")

        submitted = self._query.strip()
        if not submitted:
            return None

        self._debouncer.cancel()
        if self._on_submit is not None:
            self._on_submit(submitted)

        logger.info(f"Search submitted: query='{sanitize_for_log(submitted)}'")
        self._query = ""
        self._set_outcome(SearchOutcome.idle())
        return submitted

    def close(self) -> None:
        """위젯 종료 - 대기 중인 타이머를 취소하고 이후 사용을 막음

        두 번 호출해도 안전합니다.
        """
        if self._closed:
            return
        if self._debouncer.cancel():
            logger.debug("Pending search cancelled on close")
        self._closed = True

    async def __aenter__(self) -> "IncrementalSearchController":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # 내부
    # ------------------------------------------------------------------

    def _ensure_open(self, operation: str) -> None:
        if self._closed:
            raise SearchControllerClosedException(operation)

    def _set_outcome(self, outcome: SearchOutcome) -> None:
        previous = self._outcome.state
        self._outcome = outcome
        if previous != outcome.state:
            logger.debug(f"Search state: {previous.value} -> {outcome.state.value}")
        if self._on_change is not None:
            self._on_change(outcome)

    def _run_search(self, query: str) -> None:
        """디바운스 타이머 만료 시 실행 (DEBOUNCING → QUERYING → DISPLAYING_*)"""
        if self._closed:
            return

        self._set_outcome(SearchOutcome.querying(query))
        started = perf_counter()

        try:
            products = self.product_provider()
        except ProductFetchException as e:
            logger.warning(f"Product fetch failed: {e.error_code}")
            self._set_outcome(SearchOutcome.error(query, e.message))
            return
        except Exception as e:
            # 타이머 콜백 밖으로 나가면 QUERYING에 멈춤
            logger.error(f"Product provider error: {type(e).__name__}: {e}")
            self._set_outcome(SearchOutcome.error(query, str(e)))
            return

        results = self._search_fn(products or [], query, self.options)
        elapsed_ms = (perf_counter() - started) * 1000

        logger.debug(
            f"Search completed: query='{sanitize_for_log(query)}', "
            f"results={len(results)}, elapsed={elapsed_ms:.1f}ms"
        )
        self._set_outcome(SearchOutcome.from_results(query, results, elapsed_ms))
