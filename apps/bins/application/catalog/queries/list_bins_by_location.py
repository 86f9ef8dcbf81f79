"""List Bins By Location Query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bins.domain.entities import BinRecord
from bins.domain.enums import BinType, LocationType

if TYPE_CHECKING:
    from bins.application.ports import BinReader

MAX_PAGE_SIZE = 1000


class ListBinsByLocationQuery:
    """구/동네 단위 페이지 조회 Query."""

    def __init__(self, bin_reader: "BinReader") -> None:
        self._reader = bin_reader

    async def execute(
        self,
        bin_type: BinType,
        location_type: LocationType,
        location_id: int,
        page: int = 1,
        limit: int = 100,
    ) -> list[BinRecord]:
        """한 페이지를 조회합니다.

        Args:
            page: 1부터 시작하는 페이지 번호
            limit: 페이지 크기 (MAX_PAGE_SIZE로 보정)
        """
        page = max(1, page)
        limit = max(1, min(limit, MAX_PAGE_SIZE))
        offset = (page - 1) * limit
        return list(
            await self._reader.find_by_location(
                bin_type=bin_type,
                location_type=location_type,
                location_id=location_id,
                offset=offset,
                limit=limit,
            )
        )
