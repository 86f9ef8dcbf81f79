"""Aggregate DTOs."""

from bins.application.aggregate.dto.aggregates import DistrictAggregate, NeighborhoodAggregate

__all__ = ["DistrictAggregate", "NeighborhoodAggregate"]
