"""Aggregate By District Query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bins.application.aggregate.dto import DistrictAggregate
from bins.application.aggregate.services import CentroidAccumulator
from bins.domain.enums import BinType
from bins.domain.value_objects import BoundingBox

if TYPE_CHECKING:
    from bins.application.ports import BinReader

logger = logging.getLogger(__name__)


class AggregateByDistrictQuery:
    """bbox 내 구(district)별 개수와 중심점 집계 Query."""

    def __init__(self, bin_reader: "BinReader") -> None:
        self._reader = bin_reader

    async def execute(self, bin_type: BinType, bbox: BoundingBox) -> list[DistrictAggregate]:
        """구별 집계를 district_id 순으로 반환합니다.

        Args:
            bin_type: 컨테이너 종류
            bbox: 검증된 bbox (경계 포함)

        Returns:
            DistrictAggregate 목록
        """
        rows = await self._reader.find_grouping_rows(bin_type, bbox)

        accumulator: CentroidAccumulator[int] = CentroidAccumulator()
        for row in rows:
            accumulator.add(row.district_id, row.lat, row.lng)

        aggregates = [
            DistrictAggregate(district_id=district_id, count=count, centroid=centroid)
            for district_id, count, centroid in accumulator.results()
        ]
        logger.info(
            "District aggregation completed",
            extra={"bin_type": bin_type.value, "rows": len(rows), "groups": len(aggregates)},
        )
        return aggregates
