"""List Bins Query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bins.domain.entities import BinRecord
from bins.domain.enums import BinType

if TYPE_CHECKING:
    from bins.application.ports import BinReader


class ListBinsQuery:
    """컨테이너 전체 조회 Query."""

    def __init__(self, bin_reader: "BinReader") -> None:
        self._reader = bin_reader

    async def execute(self, bin_type: BinType) -> list[BinRecord]:
        return list(await self._reader.find_all(bin_type))
