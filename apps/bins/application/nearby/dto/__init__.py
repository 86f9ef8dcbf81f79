"""Application DTOs."""

from bins.application.nearby.dto.search_request import NearbySearchRequest

__all__ = ["NearbySearchRequest"]
