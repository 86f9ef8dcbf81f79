"""New Bin Record DTO."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class NewBinRecord:
    """적재 대상 레코드 (id/타임스탬프는 저장소가 부여)."""

    category_group_id: int
    category_id: int
    district_id: int
    address: str
    neighborhood_id: int | None = None
    lat: float | None = None
    lng: float | None = None
    load_type: str | None = None
    direction: str | None = None
    subtype: str | None = None
    placement_type: str | None = None
    notes: str | None = None
    bus_stop: str | None = None
    interurban_node: str | None = None

    def as_row(self) -> dict[str, Any]:
        return asdict(self)
