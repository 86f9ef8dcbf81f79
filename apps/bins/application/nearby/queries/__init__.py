"""Application Queries."""

from bins.application.nearby.queries.find_nearby_bins import FindNearbyBinsQuery

__all__ = ["FindNearbyBinsQuery"]
