"""Find Nearby Bins Query.

주변 컨테이너를 거리순으로 조회하는 Query(지휘자)입니다.
Port를 통해 Infrastructure와 통신하고, Service에 순수 로직을 위임합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bins.application.common.exceptions import NearbyProcedureUnavailableError
from bins.application.nearby.dto import NearbySearchRequest
from bins.application.nearby.services import (
    NearbyPolicyService,
    NearbyStrategy,
    ProcedureAvailability,
    ProximityRanker,
)
from bins.domain.entities import BinRecord
from bins.domain.services import bounding_box_for_radius
from bins.domain.value_objects import GeoPoint

if TYPE_CHECKING:
    from bins.application.ports import BinReader

logger = logging.getLogger(__name__)


class FindNearbyBinsQuery:
    """주변 컨테이너 조회 Query.

    Workflow:
        1. 반경/limit 보정 (Service)
        2. 저장소 프로시저 호출 또는 bbox 후보 조회 (Port)
        3. 정확한 거리로 재정렬 및 반경 필터 (Service)
        4. limit 만큼 자르기
    """

    def __init__(
        self,
        bin_reader: "BinReader",
        policy: NearbyPolicyService | None = None,
        availability: ProcedureAvailability | None = None,
    ) -> None:
        """Initialize.

        Args:
            bin_reader: 컨테이너 조회 Port
            policy: 반경/limit 정책 (기본값 사용 시 None)
            availability: 프로시저 미존재 기록 (요청 간 공유)
        """
        self._reader = bin_reader
        self._policy = policy or NearbyPolicyService()
        self._availability = availability or ProcedureAvailability()

    async def execute(self, request: NearbySearchRequest) -> list[BinRecord]:
        """주변 컨테이너를 가까운 순으로 조회합니다.

        Args:
            request: 검색 요청 DTO

        Returns:
            거리 오름차순 BinRecord 목록 (결과가 없으면 빈 리스트)
        """
        center = GeoPoint(lat=request.latitude, lng=request.longitude)
        radius_km = self._policy.effective_radius_km(request.radius_km)
        limit = self._policy.effective_limit(request.limit)

        if request.radius_km is not None and radius_km != request.radius_km:
            logger.info(
                "Nearby radius clamped",
                extra={"requested_km": request.radius_km, "effective_km": radius_km},
            )
        if request.limit is not None and limit != request.limit:
            logger.info(
                "Nearby limit clamped",
                extra={"requested": request.limit, "effective": limit},
            )

        logger.info(
            "Nearby search started",
            extra={
                "bin_type": request.bin_type.value,
                "lat": center.lat,
                "lng": center.lng,
                "radius_km": radius_km,
                "limit": limit,
                "strategy": self._policy.strategy.value,
            },
        )

        records = await self._search(request, center, radius_km, limit)

        logger.info("Nearby search completed", extra={"results_count": len(records)})
        return records

    async def _search(
        self,
        request: NearbySearchRequest,
        center: GeoPoint,
        radius_km: float,
        limit: int,
    ) -> list[BinRecord]:
        strategy = self._policy.strategy
        if strategy == NearbyStrategy.IN_PROCESS:
            return await self._search_in_process(request, center, radius_km, limit)
        if strategy == NearbyStrategy.AUTO and not self._availability.should_try():
            return await self._search_in_process(request, center, radius_km, limit)
        try:
            records = await self._search_native(request, center, radius_km, limit)
        except NearbyProcedureUnavailableError as exc:
            if strategy == NearbyStrategy.NATIVE:
                raise
            self._availability.mark_unavailable()
            logger.warning(
                "Native nearby procedure unavailable, falling back to in-process ranking",
                extra={"procedure": exc.procedure},
            )
            return await self._search_in_process(request, center, radius_km, limit)
        self._availability.mark_available()
        return records

    async def _search_native(
        self,
        request: NearbySearchRequest,
        center: GeoPoint,
        radius_km: float,
        limit: int,
    ) -> list[BinRecord]:
        """저장소 프로시저 결과는 이미 정렬/제한되어 있으므로 거리 필드만 제거합니다."""
        rows = await self._reader.find_nearby_native(
            bin_type=request.bin_type,
            center=center,
            radius_m=radius_km * 1000,
            limit=limit,
        )
        return [record for record, _distance in rows[:limit]]

    async def _search_in_process(
        self,
        request: NearbySearchRequest,
        center: GeoPoint,
        radius_km: float,
        limit: int,
    ) -> list[BinRecord]:
        """bbox 사전 필터 후 Haversine 재정렬.

        후보 페이지가 가득 찼는데 반경 내 결과가 limit보다 적으면
        조회 창을 두 배로 넓혀 다시 조회합니다.
        """
        delta = bounding_box_for_radius(radius_km, center.lat)
        radius_m = radius_km * 1000
        fetch_size = self._policy.initial_fetch_size(limit)

        while True:
            candidates = await self._reader.find_candidates(
                bin_type=request.bin_type,
                center=center,
                delta=delta,
                limit=fetch_size,
            )
            ranked = ProximityRanker.rank(candidates, center, radius_m)
            exhausted = len(candidates) < fetch_size
            if len(ranked) >= limit or exhausted or fetch_size >= self._policy.max_candidates:
                break
            fetch_size = min(fetch_size * 2, self._policy.max_candidates)
            logger.debug(
                "Widening nearby candidate window",
                extra={"survivors": len(ranked), "fetch_size": fetch_size},
            )

        return [record for record, _distance in ranked[:limit]]
