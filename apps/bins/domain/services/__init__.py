"""Domain Services."""

from bins.domain.services.geodesy import (
    EARTH_RADIUS_M,
    KM_PER_DEGREE,
    MAX_LNG_DELTA_DEG,
    DegreeDelta,
    bounding_box_for_radius,
    haversine_distance,
    to_radians,
)

__all__ = [
    "EARTH_RADIUS_M",
    "KM_PER_DEGREE",
    "MAX_LNG_DELTA_DEG",
    "DegreeDelta",
    "bounding_box_for_radius",
    "haversine_distance",
    "to_radians",
]
