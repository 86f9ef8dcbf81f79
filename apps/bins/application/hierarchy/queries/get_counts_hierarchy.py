"""Get Counts Hierarchy Query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bins.application.hierarchy.dto import HierarchyCount
from bins.application.hierarchy.services import HierarchyCounter
from bins.domain.enums import BinType

if TYPE_CHECKING:
    from bins.application.ports import BinReader

logger = logging.getLogger(__name__)


class GetCountsHierarchyQuery:
    """컬렉션 전체의 구/동네 계층 카운트 Query (공간 필터 없음)."""

    def __init__(self, bin_reader: "BinReader") -> None:
        self._reader = bin_reader

    async def execute(self, bin_type: BinType) -> list[HierarchyCount]:
        pairs = await self._reader.find_location_pairs(bin_type)
        counts = HierarchyCounter.count(pairs)
        logger.info(
            "Counts hierarchy computed",
            extra={"bin_type": bin_type.value, "rows": len(pairs), "groups": len(counts)},
        )
        return counts
