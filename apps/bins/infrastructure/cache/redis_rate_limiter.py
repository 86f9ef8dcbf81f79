"""Redis Rate Limiter Implementation.

Fixed Window Counter 알고리즘을 사용한 클라이언트별 Rate Limiter.

데이터 구조:
- bins:rate_limit:{key}:{window_id} → String (요청 카운트)
"""

from __future__ import annotations

import logging
import time

from redis.asyncio import Redis

from bins.application.ports.rate_limiter import RateLimiterPort, RateLimitStatus

logger = logging.getLogger(__name__)

COUNTER_KEY_PREFIX = "bins:rate_limit:"

# 한도 미만이면 INCR, 첫 요청이면 만료 설정
_CONSUME_SCRIPT = """
local counter_key = KEYS[1]
local limit = tonumber(ARGV[1])
local window_seconds = tonumber(ARGV[2])

local current = tonumber(redis.call('GET', counter_key) or '0')

if current >= limit then
    return {0, current, 0}
end

local new_count = redis.call('INCR', counter_key)
if new_count == 1 then
    redis.call('EXPIRE', counter_key, window_seconds)
end

return {1, new_count, limit - new_count}
"""


class RedisRateLimiter(RateLimiterPort):
    """Redis 기반 Rate Limiter."""

    def __init__(self, redis: Redis, max_requests: int, window_seconds: int) -> None:
        """초기화.

        Args:
            redis: Redis 클라이언트
            max_requests: 윈도우당 최대 요청 수
            window_seconds: 윈도우 크기 (초)
        """
        self._redis = redis
        self._max_requests = max_requests
        self._window_seconds = window_seconds

    def _counter_key(self, key: str, window_id: int) -> str:
        return f"{COUNTER_KEY_PREFIX}{key}:{window_id}"

    async def check_and_consume(self, key: str) -> RateLimitStatus:
        """요청 가능 여부 확인 및 카운터 증가 (Lua 스크립트로 원자적 처리)."""
        window_id = int(time.time()) // self._window_seconds
        reset_at = (window_id + 1) * self._window_seconds

        is_allowed, current, remaining = await self._redis.eval(
            _CONSUME_SCRIPT,
            1,
            self._counter_key(key, window_id),
            self._max_requests,
            self._window_seconds,
        )

        status = RateLimitStatus(
            key=key,
            remaining=int(remaining),
            reset_at=reset_at,
            is_allowed=bool(is_allowed),
        )
        if not status.is_allowed:
            logger.warning(
                "Rate limit exceeded",
                extra={"key": key, "current": current, "limit": self._max_requests},
            )
        return status
