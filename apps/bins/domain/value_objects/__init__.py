"""Domain Value Objects."""

from bins.domain.value_objects.bounding_box import BoundingBox
from bins.domain.value_objects.geo_point import GeoPoint

__all__ = ["BoundingBox", "GeoPoint"]
