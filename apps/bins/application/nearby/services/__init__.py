"""Application Services."""

from bins.application.nearby.services.nearby_policy import NearbyPolicyService, NearbyStrategy
from bins.application.nearby.services.procedure_availability import ProcedureAvailability
from bins.application.nearby.services.proximity_ranker import ProximityRanker

__all__ = ["NearbyPolicyService", "NearbyStrategy", "ProcedureAvailability", "ProximityRanker"]
