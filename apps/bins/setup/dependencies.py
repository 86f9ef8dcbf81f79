"""Dependency Injection for FastAPI."""

from __future__ import annotations

import logging
import time
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession

from bins.application.aggregate import AggregateByDistrictQuery, AggregateByNeighborhoodQuery
from bins.application.catalog import CountBinsQuery, ListBinsByLocationQuery, ListBinsQuery
from bins.application.common.exceptions import RateLimitExceededError
from bins.application.hierarchy import GetCountsHierarchyQuery
from bins.application.nearby import (
    FindNearbyBinsQuery,
    NearbyPolicyService,
    ProcedureAvailability,
)
from bins.application.ports import BinReader, RateLimiterPort
from bins.infrastructure.cache import RedisRateLimiter
from bins.infrastructure.persistence_postgres import SqlaBinReader
from bins.setup.config import get_settings
from bins.setup.database import get_db_session

logger = logging.getLogger(__name__)

_redis_client: Redis | None = None


def get_redis_client() -> Redis:
    """Redis 클라이언트 싱글톤을 반환합니다."""
    global _redis_client  # noqa: PLW0603
    if _redis_client is None:
        settings = get_settings()
        _redis_client = Redis.from_url(settings.redis_url, decode_responses=True)
        logger.info("Redis client created")
    return _redis_client


async def close_redis_client() -> None:
    global _redis_client  # noqa: PLW0603
    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None


def get_rate_limiter() -> RateLimiterPort | None:
    """Rate Limiter를 주입합니다 (비활성화 시 None)."""
    settings = get_settings()
    if not settings.rate_limit_enabled:
        return None
    return RedisRateLimiter(
        redis=get_redis_client(),
        max_requests=settings.rate_limit_max_requests,
        window_seconds=settings.rate_limit_window_seconds,
    )


async def enforce_rate_limit(
    request: Request,
    limiter: Annotated[RateLimiterPort | None, Depends(get_rate_limiter)],
) -> None:
    """클라이언트 IP 기준으로 요청 수를 제한합니다."""
    if limiter is None:
        return
    client_key = request.client.host if request.client else "unknown"
    status = await limiter.check_and_consume(client_key)
    if not status.is_allowed:
        raise RateLimitExceededError(retry_after=max(0, status.reset_at - int(time.time())))


def get_nearby_policy() -> NearbyPolicyService:
    """설정 기반 주변 검색 정책을 반환합니다."""
    settings = get_settings()
    return NearbyPolicyService(
        default_radius_km=settings.nearby_default_radius_km,
        min_radius_km=settings.nearby_min_radius_km,
        max_radius_km=settings.nearby_max_radius_km,
        default_limit=settings.nearby_default_limit,
        max_limit=settings.nearby_max_limit,
        max_candidates=settings.nearby_max_candidates,
        strategy=settings.nearby_strategy,
    )


@lru_cache
def get_procedure_availability() -> ProcedureAvailability:
    """프로시저 미존재 기록 싱글톤을 반환합니다."""
    return ProcedureAvailability(get_settings().nearby_procedure_retry_seconds)


async def get_bin_reader(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> BinReader:
    """Bin Reader를 주입합니다."""
    settings = get_settings()
    return SqlaBinReader(
        session,
        page_size=settings.scan_page_size,
        nearby_procedure=settings.nearby_procedure,
    )


async def get_find_nearby_bins_query(
    reader: Annotated[BinReader, Depends(get_bin_reader)],
    policy: Annotated[NearbyPolicyService, Depends(get_nearby_policy)],
    availability: Annotated[ProcedureAvailability, Depends(get_procedure_availability)],
) -> FindNearbyBinsQuery:
    """FindNearbyBinsQuery를 주입합니다."""
    return FindNearbyBinsQuery(reader, policy, availability)


async def get_aggregate_by_district_query(
    reader: Annotated[BinReader, Depends(get_bin_reader)],
) -> AggregateByDistrictQuery:
    return AggregateByDistrictQuery(reader)


async def get_aggregate_by_neighborhood_query(
    reader: Annotated[BinReader, Depends(get_bin_reader)],
) -> AggregateByNeighborhoodQuery:
    return AggregateByNeighborhoodQuery(reader)


async def get_counts_hierarchy_query(
    reader: Annotated[BinReader, Depends(get_bin_reader)],
) -> GetCountsHierarchyQuery:
    return GetCountsHierarchyQuery(reader)


async def get_list_bins_query(
    reader: Annotated[BinReader, Depends(get_bin_reader)],
) -> ListBinsQuery:
    return ListBinsQuery(reader)


async def get_count_bins_query(
    reader: Annotated[BinReader, Depends(get_bin_reader)],
) -> CountBinsQuery:
    return CountBinsQuery(reader)


async def get_list_bins_by_location_query(
    reader: Annotated[BinReader, Depends(get_bin_reader)],
) -> ListBinsByLocationQuery:
    return ListBinsByLocationQuery(reader)
