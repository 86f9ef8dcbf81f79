"""SqlaBinReader 공간 필터 테스트 (in-memory SQLite)."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from bins.application.nearby import (
    FindNearbyBinsQuery,
    NearbyPolicyService,
    NearbySearchRequest,
    NearbyStrategy,
)
from bins.domain.enums import BinType
from bins.domain.services import MAX_LNG_DELTA_DEG, DegreeDelta, bounding_box_for_radius
from bins.domain.value_objects import BoundingBox, GeoPoint
from bins.infrastructure.persistence_postgres import SqlaBinReader
from bins.infrastructure.persistence_postgres.tables import bin_table, metadata

IN_PROCESS = NearbyPolicyService(strategy=NearbyStrategy.IN_PROCESS)


@pytest.fixture
async def session() -> AsyncIterator[AsyncSession]:
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    async with async_sessionmaker(engine, expire_on_commit=False)() as session:
        yield session
    await engine.dispose()


async def _insert(
    session: AsyncSession,
    bin_type: BinType,
    points: list[tuple[int, float | None, float | None]],
    **columns,
) -> None:
    rows = [
        {
            "id": id,
            "category_group_id": 1,
            "category_id": 11,
            "district_id": columns.get("district_id", 1),
            "neighborhood_id": columns.get("neighborhood_id"),
            "address": f"Calle {id}",
            "lat": lat,
            "lng": lng,
        }
        for id, lat, lng in points
    ]
    await session.execute(insert(bin_table(bin_type)), rows)
    await session.commit()


class TestCandidateWindow:
    """find_candidates의 위도/경도 창과 정렬."""

    async def test_plain_window(self, session: AsyncSession) -> None:
        center = GeoPoint(lat=40.4168, lng=-3.7038)
        await _insert(
            session,
            BinType.GLASS,
            [
                (1, 40.4168, -3.7038 + 0.009),
                (2, 40.4168, -3.7038 + 0.011),
                (3, 40.4168 + 0.011, -3.7038),
                (4, 40.4168 - 0.005, -3.7038 - 0.005),
                (5, None, None),
            ],
        )

        rows = await SqlaBinReader(session).find_candidates(
            BinType.GLASS, center, delta=DegreeDelta(0.01, 0.01), limit=10
        )

        assert [r.id for r in rows] == [4, 1]

    async def test_window_split_at_antimeridian(self, session: AsyncSession) -> None:
        """-180 아래로 넘친 창은 +180 쪽 구간까지 포함하고 감싼 거리로 정렬."""
        center = GeoPoint(lat=0.0, lng=-179.99)
        await _insert(
            session,
            BinType.GLASS,
            [(1, 0.0, -179.95), (2, 0.0, 179.98), (3, 0.0, 179.90), (4, 0.0, -179.90)],
        )

        rows = await SqlaBinReader(session).find_candidates(
            BinType.GLASS, center, delta=DegreeDelta(0.05, 0.05), limit=10
        )

        assert [r.id for r in rows] == [2, 1]

    async def test_wrapped_neighbor_survives_limit(self, session: AsyncSession) -> None:
        """날짜변경선 건너편의 가까운 레코드가 LIMIT에 잘리지 않음."""
        await _insert(
            session,
            BinType.GLASS,
            [(1, 0.0, -179.995), (2, 0.0, 179.72), (3, 0.0, 179.71)],
        )
        request = NearbySearchRequest(
            bin_type=BinType.GLASS, latitude=0.0, longitude=179.99, radius_km=50, limit=1
        )

        result = await FindNearbyBinsQuery(SqlaBinReader(session), IN_PROCESS).execute(request)

        assert [r.id for r in result] == [1]

    async def test_pole_cap_has_no_longitude_filter(self, session: AsyncSession) -> None:
        center = GeoPoint(lat=89.99, lng=10.0)
        delta = bounding_box_for_radius(5.0, center.lat)
        assert delta.lng_delta == MAX_LNG_DELTA_DEG
        await _insert(
            session,
            BinType.GLASS,
            [(1, 89.995, 10.0), (2, 89.995, 179.0), (3, 89.995, -170.0), (4, 89.9, 10.0)],
        )

        rows = await SqlaBinReader(session).find_candidates(
            BinType.GLASS, center, delta=delta, limit=10
        )

        assert sorted(r.id for r in rows) == [1, 2, 3]

    def test_longitude_window_clauses(self) -> None:
        table = bin_table(BinType.GLASS)
        assert SqlaBinReader._longitude_window(table, 10.0, MAX_LNG_DELTA_DEG) == []

        [clause] = SqlaBinReader._longitude_window(table, 179.5, 1.0)
        stmt = select(table.c.id).where(clause)
        compiled = str(stmt.compile(compile_kwargs={"literal_binds": True}))
        assert "glass_bins.lng >= 178.5 OR glass_bins.lng <= -179.5" in compiled


class TestGroupingRowsBoundingBox:
    """find_grouping_rows의 bbox는 경계를 포함합니다."""

    async def test_edges_are_inclusive(self, session: AsyncSession) -> None:
        bbox = BoundingBox(min_lat=40.3, min_lng=-3.9, max_lat=40.6, max_lng=-3.5)
        await _insert(
            session,
            BinType.PAPER,
            [
                (1, 40.3, -3.7),
                (2, 40.6, -3.7),
                (3, 40.45, -3.9),
                (4, 40.45, -3.5),
                (5, 40.6, -3.5),
                (6, 40.2999, -3.7),
                (7, 40.45, -3.4999),
                (8, None, None),
            ],
            district_id=2,
        )

        rows = await SqlaBinReader(session).find_grouping_rows(BinType.PAPER, bbox)

        assert [(r.lat, r.lng) for r in rows] == [
            (40.3, -3.7),
            (40.6, -3.7),
            (40.45, -3.9),
            (40.45, -3.5),
            (40.6, -3.5),
        ]
        assert {r.district_id for r in rows} == {2}
        assert all(r.neighborhood_id is None for r in rows)


class TestFullScan:
    async def test_location_pairs_across_pages(self, session: AsyncSession) -> None:
        await _insert(
            session,
            BinType.OIL,
            [(i, None, None) for i in range(1, 6)],
            district_id=3,
            neighborhood_id=9,
        )

        pairs = await SqlaBinReader(session, page_size=2).find_location_pairs(BinType.OIL)

        assert len(pairs) == 5
        assert {(p.district_id, p.neighborhood_id) for p in pairs} == {(3, 9)}
