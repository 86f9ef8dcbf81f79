"""Bins Domain Layer."""

from bins.domain.entities import BinRecord
from bins.domain.enums import BinType, LocationType
from bins.domain.value_objects import BoundingBox, GeoPoint

__all__ = ["BinRecord", "BinType", "LocationType", "BoundingBox", "GeoPoint"]
