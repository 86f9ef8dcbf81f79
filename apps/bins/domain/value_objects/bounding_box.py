"""BoundingBox Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from bins.domain.exceptions.geo import InvalidBoundingBoxError
from bins.domain.value_objects.geo_point import validate_latitude, validate_longitude


@dataclass(frozen=True)
class BoundingBox:
    """위경도 축 정렬 사각형.

    네 변 모두 경계를 포함(inclusive)합니다. 생성 시점에 검증되므로
    집계 엔진은 항상 유효한 bbox만 받습니다.
    """

    min_lat: float
    min_lng: float
    max_lat: float
    max_lng: float

    def __post_init__(self) -> None:
        validate_latitude(self.min_lat)
        validate_latitude(self.max_lat)
        validate_longitude(self.min_lng)
        validate_longitude(self.max_lng)
        if self.min_lat > self.max_lat:
            raise InvalidBoundingBoxError("lat", self.min_lat, self.max_lat)
        if self.min_lng > self.max_lng:
            raise InvalidBoundingBoxError("lng", self.min_lng, self.max_lng)

    def contains(self, lat: float, lng: float) -> bool:
        """좌표가 bbox 안(경계 포함)에 있는지 확인합니다."""
        return self.min_lat <= lat <= self.max_lat and self.min_lng <= lng <= self.max_lng
