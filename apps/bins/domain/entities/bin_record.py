"""BinRecord Entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from bins.domain.value_objects import GeoPoint


@dataclass(frozen=True)
class BinRecord:
    """재활용 컨테이너(수거 지점) 엔티티.

    공공데이터 CSV에서 적재된 불변 레코드입니다. 컨테이너 종류는
    테이블 단위로 나뉘므로 엔티티에는 포함되지 않습니다.
    """

    id: int
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
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lng is not None

    def coordinates(self) -> GeoPoint | None:
        """좌표 Value Object를 반환합니다."""
        if self.lat is None or self.lng is None:
            return None
        return GeoPoint(lat=self.lat, lng=self.lng)
