"""도메인 예외."""

from bins.domain.exceptions.base import DomainError
from bins.domain.exceptions.geo import InvalidBoundingBoxError, InvalidCoordinatesError

__all__ = [
    "DomainError",
    "InvalidBoundingBoxError",
    "InvalidCoordinatesError",
]
