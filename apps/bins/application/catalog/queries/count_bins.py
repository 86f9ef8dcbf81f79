"""Count Bins Query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bins.domain.enums import BinType

if TYPE_CHECKING:
    from bins.application.ports import BinReader


class CountBinsQuery:
    """컨테이너 수 조회 Query."""

    def __init__(self, bin_reader: "BinReader") -> None:
        self._reader = bin_reader

    async def execute(self, bin_type: BinType) -> int:
        return await self._reader.count(bin_type)
