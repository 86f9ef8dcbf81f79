"""Rate Limiter Port.

클라이언트별 요청 수 제한을 위한 추상화.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class RateLimitStatus:
    """Rate Limit 상태.

    Attributes:
        key: 클라이언트 식별자
        remaining: 남은 요청 수
        reset_at: 리셋 시간 (Unix timestamp)
        is_allowed: 요청 허용 여부
    """

    key: str
    remaining: int
    reset_at: int
    is_allowed: bool


class RateLimiterPort(ABC):
    """Rate Limiter 포트."""

    @abstractmethod
    async def check_and_consume(self, key: str) -> RateLimitStatus:
        """요청 가능 여부 확인 및 카운터 증가.

        Args:
            key: 클라이언트 식별자

        Returns:
            Rate Limit 상태
        """
        pass
