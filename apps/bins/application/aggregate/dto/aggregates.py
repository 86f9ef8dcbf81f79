"""Aggregate DTOs."""

from __future__ import annotations

from dataclasses import dataclass

from bins.domain.value_objects import GeoPoint


@dataclass(frozen=True)
class DistrictAggregate:
    """구(district) 단위 집계."""

    district_id: int
    count: int
    centroid: GeoPoint


@dataclass(frozen=True)
class NeighborhoodAggregate:
    """동네(neighborhood) 단위 집계."""

    district_id: int
    neighborhood_id: int | None
    count: int
    centroid: GeoPoint
