"""Debouncer - Cancellable single-shot timer on the asyncio event loop"""

import asyncio
from typing import Any, Callable, Optional


class Debouncer:
    """디바운스 타이머

    trigger()가 호출될 때마다 이전 타이머를 취소하고 새 타이머를 예약합니다.
    마지막 trigger()의 타이머만 실행될 수 있습니다.

    Usage:
        debouncer = Debouncer(0.3, callback)
        debouncer.trigger("ک")
        debouncer.trigger("کا")   # 이전 타이머 취소
        ...
        debouncer.cancel()        # 위젯 종료 시
    """

    def __init__(
        self,
        delay: float,
        callback: Callable[..., Any],
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        """
        Args:
            delay: 지연 시간 (초)
            callback: 타이머 만료 시 호출할 함수
            loop: 이벤트 루프 (기본값: trigger 시점의 실행 중인 루프)
        """
        if delay < 0:
            raise ValueError(f"delay must be >= 0 (got {delay})")
        self.delay = delay
        self._callback = callback
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        """대기 중인 타이머 존재 여부"""
        return self._handle is not None

    def trigger(self, *args: Any) -> None:
        """타이머 (재)시작

        Raises:
            RuntimeError: 이벤트 루프가 없는 경우
        """
        self.cancel()
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, *args)

    def cancel(self) -> bool:
        """대기 중인 타이머 취소

        Returns:
            bool: 취소된 타이머가 있었는지 여부
        """
        if self._handle is None:
            return False
        self._handle.cancel()
        self._handle = None
        return True

    def _fire(self, *args: Any) -> None:
        self._handle = None
        self._callback(*args)
