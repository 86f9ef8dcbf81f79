"""Test fixtures for bins tests."""

from __future__ import annotations

import math
from typing import Sequence
from unittest.mock import AsyncMock

import pytest

from bins.application.common.exceptions import NearbyProcedureUnavailableError
from bins.application.ports import BinReader, GroupingRow, LocationPair
from bins.domain.entities import BinRecord
from bins.domain.enums import BinType, LocationType
from bins.domain.services import MAX_LNG_DELTA_DEG, DegreeDelta, haversine_distance
from bins.domain.value_objects import BoundingBox, GeoPoint

MADRID_CENTER = GeoPoint(lat=40.4168, lng=-3.7038)


def make_bin(
    id: int,
    lat: float | None,
    lng: float | None,
    district_id: int = 1,
    neighborhood_id: int | None = 1,
) -> BinRecord:
    return BinRecord(
        id=id,
        category_group_id=1,
        category_id=11,
        district_id=district_id,
        neighborhood_id=neighborhood_id,
        address=f"Calle {id}",
        lat=lat,
        lng=lng,
    )


class FakeBinReader(BinReader):
    """메모리 기반 BinReader.

    native=False면 저장소 프로시저가 없는 것처럼 동작합니다.
    """

    def __init__(self, records: dict[BinType, list[BinRecord]] | None = None, native: bool = False):
        self.records = records or {}
        self.native = native
        self.candidate_limits: list[int] = []
        self.native_calls = 0

    def _all(self, bin_type: BinType) -> list[BinRecord]:
        return list(self.records.get(bin_type, []))

    async def find_nearby_native(
        self,
        bin_type: BinType,
        center: GeoPoint,
        radius_m: float,
        limit: int,
    ) -> Sequence[tuple[BinRecord, float]]:
        self.native_calls += 1
        if not self.native:
            raise NearbyProcedureUnavailableError("find_nearby_bins")
        rows = [
            (r, haversine_distance(center.lat, center.lng, r.lat, r.lng))
            for r in self._all(bin_type)
            if r.has_coordinates()
        ]
        rows = sorted((row for row in rows if row[1] <= radius_m), key=lambda row: row[1])
        return rows[:limit]

    async def find_candidates(
        self,
        bin_type: BinType,
        center: GeoPoint,
        delta: DegreeDelta,
        limit: int,
    ) -> Sequence[BinRecord]:
        self.candidate_limits.append(limit)
        scale = math.cos(math.radians(center.lat))
        candidates = [
            r
            for r in self._all(bin_type)
            if r.has_coordinates()
            and abs(r.lat - center.lat) <= delta.lat_delta
            and (delta.lng_delta >= MAX_LNG_DELTA_DEG or abs(r.lng - center.lng) <= delta.lng_delta)
        ]
        candidates.sort(
            key=lambda r: ((r.lat - center.lat) ** 2 + ((r.lng - center.lng) * scale) ** 2, r.id)
        )
        return candidates[:limit]

    async def find_grouping_rows(self, bin_type: BinType, bbox: BoundingBox) -> Sequence[GroupingRow]:
        return [
            GroupingRow(r.district_id, r.neighborhood_id, r.lat, r.lng)
            for r in self._all(bin_type)
            if r.has_coordinates() and bbox.contains(r.lat, r.lng)
        ]

    async def find_location_pairs(self, bin_type: BinType) -> Sequence[LocationPair]:
        return [LocationPair(r.district_id, r.neighborhood_id) for r in self._all(bin_type)]

    async def find_all(self, bin_type: BinType) -> Sequence[BinRecord]:
        return sorted(
            self._all(bin_type),
            key=lambda r: (r.district_id, r.neighborhood_id is None, r.neighborhood_id or 0, r.id),
        )

    async def find_by_location(
        self,
        bin_type: BinType,
        location_type: LocationType,
        location_id: int,
        offset: int,
        limit: int,
    ) -> Sequence[BinRecord]:
        field = location_type.column_name
        matched = [r for r in await self.find_all(bin_type) if getattr(r, field) == location_id]
        return matched[offset : offset + limit]

    async def count(self, bin_type: BinType) -> int:
        return len(self._all(bin_type))


@pytest.fixture
def center_bin() -> BinRecord:
    """Madrid 중심 좌표의 컨테이너."""
    return make_bin(1, MADRID_CENTER.lat, MADRID_CENTER.lng)


@pytest.fixture
def far_bin() -> BinRecord:
    """중심에서 약 12 km 떨어진 컨테이너."""
    return make_bin(2, 40.5, -3.8, district_id=2, neighborhood_id=None)


@pytest.fixture
def fake_reader(center_bin: BinRecord, far_bin: BinRecord) -> FakeBinReader:
    """glass_bins에 두 레코드가 있는 Fake Reader."""
    return FakeBinReader({BinType.GLASS: [center_bin, far_bin]})


@pytest.fixture
def mock_bin_reader() -> AsyncMock:
    """BinReader mock."""
    reader = AsyncMock()
    reader.find_nearby_native = AsyncMock(return_value=[])
    reader.find_candidates = AsyncMock(return_value=[])
    reader.find_grouping_rows = AsyncMock(return_value=[])
    reader.find_location_pairs = AsyncMock(return_value=[])
    reader.find_all = AsyncMock(return_value=[])
    reader.find_by_location = AsyncMock(return_value=[])
    reader.count = AsyncMock(return_value=0)
    return reader


@pytest.fixture
def bin_factory():
    """make_bin 헬퍼."""
    return make_bin


@pytest.fixture
def reader_factory():
    """FakeBinReader 생성 헬퍼."""
    return FakeBinReader
