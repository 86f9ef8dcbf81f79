"""Redis Infrastructure."""

from bins.infrastructure.cache.redis_rate_limiter import RedisRateLimiter

__all__ = ["RedisRateLimiter"]
