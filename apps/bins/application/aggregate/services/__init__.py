"""Aggregate Services."""

from bins.application.aggregate.services.centroid_accumulator import CentroidAccumulator

__all__ = ["CentroidAccumulator"]
