"""Location Type Enum."""

from __future__ import annotations

from enum import Enum


class LocationType(str, Enum):
    """위치 조회 기준."""

    DISTRICT = "district"
    NEIGHBORHOOD = "neighborhood"

    @property
    def column_name(self) -> str:
        return f"{self.value}_id"
