"""Bin Reader Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from bins.domain.entities import BinRecord
from bins.domain.enums import BinType, LocationType
from bins.domain.services import DegreeDelta
from bins.domain.value_objects import BoundingBox, GeoPoint


@dataclass(frozen=True)
class GroupingRow:
    """집계용 투영 행 (그룹 키 + 좌표)."""

    district_id: int
    neighborhood_id: int | None
    lat: float
    lng: float


@dataclass(frozen=True)
class LocationPair:
    """계층 카운트용 투영 행."""

    district_id: int
    neighborhood_id: int | None


class BinReader(ABC):
    """컨테이너 데이터 조회 포트.

    컨테이너 종류(BinType)로 컬렉션을 선택하는 단일 인터페이스입니다.
    저장소 통신 실패는 QueryFailedError로 전달해야 합니다.
    Infrastructure Layer에서 구현합니다.
    """

    @abstractmethod
    async def find_nearby_native(
        self,
        bin_type: BinType,
        center: GeoPoint,
        radius_m: float,
        limit: int,
    ) -> Sequence[tuple[BinRecord, float]]:
        """저장소 측 프로시저로 반경 내 컨테이너를 조회합니다.

        Args:
            bin_type: 컨테이너 종류
            center: 기준 좌표
            radius_m: 반경 (m)
            limit: 최대 결과 수

        Returns:
            거리 오름차순으로 정렬된 (BinRecord, 거리_m) 튜플 목록

        Raises:
            NearbyProcedureUnavailableError: 프로시저가 없을 때
        """
        ...

    @abstractmethod
    async def find_candidates(
        self,
        bin_type: BinType,
        center: GeoPoint,
        delta: DegreeDelta,
        limit: int,
    ) -> Sequence[BinRecord]:
        """기준점 주변 사각형 안의 후보를 조회합니다.

        좌표가 없는 레코드는 제외합니다. 결과는 기준점과의 근사 거리
        순으로 최대 limit개입니다.
        """
        ...

    @abstractmethod
    async def find_grouping_rows(
        self,
        bin_type: BinType,
        bbox: BoundingBox,
    ) -> Sequence[GroupingRow]:
        """bbox(경계 포함) 안의 그룹 키와 좌표를 모두 조회합니다."""
        ...

    @abstractmethod
    async def find_location_pairs(self, bin_type: BinType) -> Sequence[LocationPair]:
        """전체 컬렉션의 (district_id, neighborhood_id) 쌍을 조회합니다."""
        ...

    @abstractmethod
    async def find_all(self, bin_type: BinType) -> Sequence[BinRecord]:
        """전체 컨테이너를 district, neighborhood 순으로 조회합니다."""
        ...

    @abstractmethod
    async def find_by_location(
        self,
        bin_type: BinType,
        location_type: LocationType,
        location_id: int,
        offset: int,
        limit: int,
    ) -> Sequence[BinRecord]:
        """구(district) 또는 동네(neighborhood) 단위로 조회합니다."""
        ...

    @abstractmethod
    async def count(self, bin_type: BinType) -> int:
        """컨테이너 수를 반환합니다."""
        ...
