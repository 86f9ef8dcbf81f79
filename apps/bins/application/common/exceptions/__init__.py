"""Application Exceptions."""

from bins.application.common.exceptions.base import ApplicationError
from bins.application.common.exceptions.query import (
    NearbyProcedureUnavailableError,
    QueryFailedError,
)
from bins.application.common.exceptions.validation import (
    InvalidBinTypeError,
    InvalidLocationTypeError,
    RateLimitExceededError,
)

__all__ = [
    "ApplicationError",
    "InvalidBinTypeError",
    "InvalidLocationTypeError",
    "NearbyProcedureUnavailableError",
    "QueryFailedError",
    "RateLimitExceededError",
]
