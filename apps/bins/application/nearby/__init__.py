"""Nearby Bins Application Layer."""

from bins.application.nearby.dto import NearbySearchRequest
from bins.application.nearby.queries import FindNearbyBinsQuery
from bins.application.nearby.services import (
    NearbyPolicyService,
    NearbyStrategy,
    ProcedureAvailability,
    ProximityRanker,
)

__all__ = [
    "NearbySearchRequest",
    "FindNearbyBinsQuery",
    "NearbyPolicyService",
    "NearbyStrategy",
    "ProcedureAvailability",
    "ProximityRanker",
]
