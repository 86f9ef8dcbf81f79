"""Aggregate Queries."""

from bins.application.aggregate.queries.aggregate_by_district import AggregateByDistrictQuery
from bins.application.aggregate.queries.aggregate_by_neighborhood import (
    AggregateByNeighborhoodQuery,
)

__all__ = ["AggregateByDistrictQuery", "AggregateByNeighborhoodQuery"]
