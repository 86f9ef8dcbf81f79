"""SQLAlchemy Bin Reader Implementation."""

from __future__ import annotations

import logging
import math
import re
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Sequence

from sqlalchemy import Select, Table, and_, case, func, or_, select, text
from sqlalchemy.exc import ProgrammingError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bins.application.common.exceptions import NearbyProcedureUnavailableError, QueryFailedError
from bins.application.ports import BinReader, GroupingRow, LocationPair
from bins.domain.entities import BinRecord
from bins.domain.enums import BinType, LocationType
from bins.domain.services import MAX_LNG_DELTA_DEG, DegreeDelta, to_radians
from bins.domain.value_objects import BoundingBox, GeoPoint
from bins.infrastructure.persistence_postgres.tables import bin_table

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 1000
DEFAULT_NEARBY_PROCEDURE = "find_nearby_bins"
_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")


@contextmanager
def _query_errors(operation: str) -> Iterator[None]:
    """SQLAlchemy 예외를 QueryFailedError로 변환합니다."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Bin query failed", extra={"operation": operation, "error": str(exc)})
        raise QueryFailedError(operation, str(exc)) from exc


class SqlaBinReader(BinReader):
    """SQLAlchemy 기반 컨테이너 Reader.

    BinReader Port를 구현합니다.
    전체 스캔은 고정 페이지 크기로 나눠 조회한 뒤 이어 붙입니다.
    """

    def __init__(
        self,
        session: AsyncSession,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        nearby_procedure: str = DEFAULT_NEARBY_PROCEDURE,
    ) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션
            page_size: 전체 스캔 페이지 크기
            nearby_procedure: 저장소 측 주변 검색 함수 이름
        """
        if not _IDENTIFIER.match(nearby_procedure):
            raise ValueError(f"Invalid procedure name: {nearby_procedure!r}")
        self._session = session
        self._page_size = page_size
        self._nearby_procedure = nearby_procedure

    async def find_nearby_native(
        self,
        bin_type: BinType,
        center: GeoPoint,
        radius_m: float,
        limit: int,
    ) -> Sequence[tuple[BinRecord, float]]:
        """저장소 함수로 반경 내 컨테이너를 조회합니다.

        함수는 컨테이너 컬럼과 distance_m 컬럼을 거리 오름차순으로 반환합니다.
        """
        stmt = text(
            f"SELECT * FROM {self._nearby_procedure}"
            "(:table_name, :lat, :lng, :radius_m, :max_results)"
        )
        params = {
            "table_name": bin_type.table_name,
            "lat": center.lat,
            "lng": center.lng,
            "radius_m": radius_m,
            "max_results": limit,
        }
        try:
            result = await self._session.execute(stmt, params)
        except ProgrammingError as exc:
            # 함수 미존재. 실패한 트랜잭션을 정리해야 fallback 쿼리가 가능하다.
            await self._session.rollback()
            logger.warning(
                "Nearby procedure call failed",
                extra={"procedure": self._nearby_procedure, "error": str(exc)},
            )
            raise NearbyProcedureUnavailableError(self._nearby_procedure) from exc
        except SQLAlchemyError as exc:
            raise QueryFailedError("find_nearby_native", str(exc)) from exc

        rows: list[tuple[BinRecord, float]] = []
        for row in result.mappings().all():
            distance = row.get("distance_m")
            if distance is None:
                continue
            rows.append((self._to_domain(row), float(distance)))
        return rows

    async def find_candidates(
        self,
        bin_type: BinType,
        center: GeoPoint,
        delta: DegreeDelta,
        limit: int,
    ) -> Sequence[BinRecord]:
        """사각형 후보를 근사 거리 순으로 조회합니다.

        정렬 키는 equirectangular 제곱 거리로, 도시 규모에서 실제 거리와
        같은 순서를 가지며 행마다 삼각함수를 계산하지 않습니다.
        """
        table = bin_table(bin_type)
        lat_gap = table.c.lat - center.lat
        lng_gap = self._wrapped_lng_gap(table, center.lng) * math.cos(to_radians(center.lat))
        approx_distance = lat_gap * lat_gap + lng_gap * lng_gap

        stmt = (
            select(table)
            .where(
                table.c.lat.is_not(None),
                table.c.lng.is_not(None),
                table.c.lat.between(
                    max(-90.0, center.lat - delta.lat_delta),
                    min(90.0, center.lat + delta.lat_delta),
                ),
                *self._longitude_window(table, center.lng, delta.lng_delta),
            )
            .order_by(approx_distance.asc(), table.c.id.asc())
            .limit(limit)
        )
        with _query_errors("find_candidates"):
            result = await self._session.execute(stmt)
            return [self._to_domain(row) for row in result.mappings().all()]

    async def find_grouping_rows(
        self,
        bin_type: BinType,
        bbox: BoundingBox,
    ) -> Sequence[GroupingRow]:
        """bbox 안의 그룹 키와 좌표를 조회합니다."""
        table = bin_table(bin_type)
        stmt = (
            select(table.c.district_id, table.c.neighborhood_id, table.c.lat, table.c.lng)
            .where(
                table.c.lat.is_not(None),
                table.c.lng.is_not(None),
                table.c.lat.between(bbox.min_lat, bbox.max_lat),
                table.c.lng.between(bbox.min_lng, bbox.max_lng),
            )
            .order_by(table.c.id.asc())
        )
        with _query_errors("find_grouping_rows"):
            rows = await self._fetch_pages(stmt)
        return [
            GroupingRow(
                district_id=int(row["district_id"]),
                neighborhood_id=_optional_int(row["neighborhood_id"]),
                lat=float(row["lat"]),
                lng=float(row["lng"]),
            )
            for row in rows
        ]

    async def find_location_pairs(self, bin_type: BinType) -> Sequence[LocationPair]:
        """전체 (district_id, neighborhood_id) 쌍을 조회합니다."""
        table = bin_table(bin_type)
        stmt = select(table.c.district_id, table.c.neighborhood_id).order_by(table.c.id.asc())
        with _query_errors("find_location_pairs"):
            rows = await self._fetch_pages(stmt)
        return [
            LocationPair(
                district_id=int(row["district_id"]),
                neighborhood_id=_optional_int(row["neighborhood_id"]),
            )
            for row in rows
        ]

    async def find_all(self, bin_type: BinType) -> Sequence[BinRecord]:
        table = bin_table(bin_type)
        stmt = select(table).order_by(
            table.c.district_id.asc(),
            table.c.neighborhood_id.asc(),
            table.c.id.asc(),
        )
        with _query_errors("find_all"):
            rows = await self._fetch_pages(stmt)
        return [self._to_domain(row) for row in rows]

    async def find_by_location(
        self,
        bin_type: BinType,
        location_type: LocationType,
        location_id: int,
        offset: int,
        limit: int,
    ) -> Sequence[BinRecord]:
        table = bin_table(bin_type)
        stmt = (
            select(table)
            .where(table.c[location_type.column_name] == location_id)
            .order_by(
                table.c.district_id.asc(),
                table.c.neighborhood_id.asc(),
                table.c.id.asc(),
            )
            .offset(offset)
            .limit(limit)
        )
        with _query_errors("find_by_location"):
            result = await self._session.execute(stmt)
            return [self._to_domain(row) for row in result.mappings().all()]

    async def count(self, bin_type: BinType) -> int:
        """컨테이너 수를 반환합니다."""
        table = bin_table(bin_type)
        with _query_errors("count"):
            result = await self._session.execute(select(func.count()).select_from(table))
            return int(result.scalar_one())

    async def _fetch_pages(self, stmt: Select) -> list[Mapping[str, Any]]:
        """정렬된 쿼리를 page_size 단위로 끝까지 조회합니다."""
        rows: list[Mapping[str, Any]] = []
        offset = 0
        while True:
            result = await self._session.execute(stmt.offset(offset).limit(self._page_size))
            page = result.mappings().all()
            rows.extend(page)
            if len(page) < self._page_size:
                return rows
            offset += self._page_size

    @staticmethod
    def _longitude_window(table: Table, lng: float, lng_delta: float) -> list:
        """경도 조건. 날짜변경선을 넘으면 두 구간으로 나눕니다."""
        if lng_delta >= MAX_LNG_DELTA_DEG:
            return []
        low, high = lng - lng_delta, lng + lng_delta
        if low < -180.0:
            return [or_(table.c.lng >= low + 360.0, table.c.lng <= high)]
        if high > 180.0:
            return [or_(table.c.lng >= low, table.c.lng <= high - 360.0)]
        return [and_(table.c.lng >= low, table.c.lng <= high)]

    @staticmethod
    def _wrapped_lng_gap(table: Table, lng: float):
        """경도 차이 절댓값. 날짜변경선 건너편은 360도에서 뺀 값을 씁니다."""
        gap = func.abs(table.c.lng - lng)
        return case((gap > 180.0, 360.0 - gap), else_=gap)

    @staticmethod
    def _to_domain(row: Mapping[str, Any]) -> BinRecord:
        """조회 행을 도메인 엔티티로 변환합니다."""
        return BinRecord(
            id=int(row["id"]),
            category_group_id=int(row["category_group_id"]),
            category_id=int(row["category_id"]),
            district_id=int(row["district_id"]),
            neighborhood_id=_optional_int(row.get("neighborhood_id")),
            address=row.get("address") or "",
            lat=_optional_float(row.get("lat")),
            lng=_optional_float(row.get("lng")),
            load_type=row.get("load_type"),
            direction=row.get("direction"),
            subtype=row.get("subtype"),
            placement_type=row.get("placement_type"),
            notes=row.get("notes"),
            bus_stop=row.get("bus_stop"),
            interurban_node=row.get("interurban_node"),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


def _optional_float(value: Any) -> float | None:
    return None if value is None else float(value)
