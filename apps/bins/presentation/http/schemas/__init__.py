"""HTTP Schemas."""

from bins.presentation.http.schemas.bins import (
    BinCount,
    BinEntry,
    DistrictAggregateEntry,
    GeoPointSchema,
    HierarchyCountEntry,
    NeighborhoodAggregateEntry,
)

__all__ = [
    "BinCount",
    "BinEntry",
    "DistrictAggregateEntry",
    "GeoPointSchema",
    "HierarchyCountEntry",
    "NeighborhoodAggregateEntry",
]
