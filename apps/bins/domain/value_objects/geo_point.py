"""GeoPoint Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from bins.domain.exceptions.geo import InvalidCoordinatesError

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


def validate_latitude(value: float) -> None:
    if not MIN_LATITUDE <= value <= MAX_LATITUDE:
        raise InvalidCoordinatesError("latitude", value, MIN_LATITUDE, MAX_LATITUDE)


def validate_longitude(value: float) -> None:
    if not MIN_LONGITUDE <= value <= MAX_LONGITUDE:
        raise InvalidCoordinatesError("longitude", value, MIN_LONGITUDE, MAX_LONGITUDE)


@dataclass(frozen=True)
class GeoPoint:
    """WGS84 좌표 (도 단위).

    검색 기준점과 집계 중심점 양쪽에 사용됩니다.
    """

    lat: float
    lng: float

    def __post_init__(self) -> None:
        validate_latitude(self.lat)
        validate_longitude(self.lng)
