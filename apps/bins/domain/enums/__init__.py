"""Domain Enums."""

from bins.domain.enums.bin_type import BinType
from bins.domain.enums.location_type import LocationType

__all__ = ["BinType", "LocationType"]
