"""Geographic Aggregation Application Layer."""

from bins.application.aggregate.dto import DistrictAggregate, NeighborhoodAggregate
from bins.application.aggregate.queries import (
    AggregateByDistrictQuery,
    AggregateByNeighborhoodQuery,
)
from bins.application.aggregate.services import CentroidAccumulator

__all__ = [
    "DistrictAggregate",
    "NeighborhoodAggregate",
    "AggregateByDistrictQuery",
    "AggregateByNeighborhoodQuery",
    "CentroidAccumulator",
]
