"""Aggregate By Neighborhood Query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bins.application.aggregate.dto import NeighborhoodAggregate
from bins.application.aggregate.services import CentroidAccumulator
from bins.domain.enums import BinType
from bins.domain.value_objects import BoundingBox

if TYPE_CHECKING:
    from bins.application.ports import BinReader

logger = logging.getLogger(__name__)


class AggregateByNeighborhoodQuery:
    """bbox 내 (district, neighborhood)별 개수와 중심점 집계 Query."""

    def __init__(self, bin_reader: "BinReader") -> None:
        self._reader = bin_reader

    async def execute(self, bin_type: BinType, bbox: BoundingBox) -> list[NeighborhoodAggregate]:
        """동네별 집계를 (district_id, neighborhood_id) 순으로 반환합니다.

        neighborhood가 없는 레코드는 해당 district의 별도 그룹이 됩니다.
        """
        rows = await self._reader.find_grouping_rows(bin_type, bbox)

        accumulator: CentroidAccumulator[tuple[int, int | None]] = CentroidAccumulator()
        for row in rows:
            accumulator.add((row.district_id, row.neighborhood_id), row.lat, row.lng)

        aggregates = [
            NeighborhoodAggregate(
                district_id=district_id,
                neighborhood_id=neighborhood_id,
                count=count,
                centroid=centroid,
            )
            for (district_id, neighborhood_id), count, centroid in accumulator.results()
        ]
        logger.info(
            "Neighborhood aggregation completed",
            extra={"bin_type": bin_type.value, "rows": len(rows), "groups": len(aggregates)},
        )
        return aggregates
