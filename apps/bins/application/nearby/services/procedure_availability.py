"""Procedure Availability.

저장소 측 주변 검색 함수의 사용 가능 여부를 프로세스 단위로 기억합니다.
"""

from __future__ import annotations

import time
from typing import Callable

DEFAULT_RETRY_SECONDS = 300.0


class ProcedureAvailability:
    """AUTO 전략의 프로시저 미존재 기록.

    미존재로 표시되면 retry_seconds 동안 프로시저를 호출하지 않고
    바로 in-process 검색을 사용합니다. 그 뒤 한 번 다시 호출해 봅니다.
    """

    def __init__(
        self,
        retry_seconds: float = DEFAULT_RETRY_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._retry_seconds = retry_seconds
        self._clock = clock
        self._unavailable_until: float | None = None

    @property
    def is_marked_unavailable(self) -> bool:
        return self._unavailable_until is not None

    def should_try(self) -> bool:
        """프로시저를 호출해 볼 차례인지 반환합니다."""
        if self._unavailable_until is None:
            return True
        if self._clock() >= self._unavailable_until:
            self._unavailable_until = None
            return True
        return False

    def mark_unavailable(self) -> None:
        self._unavailable_until = self._clock() + self._retry_seconds

    def mark_available(self) -> None:
        self._unavailable_until = None
