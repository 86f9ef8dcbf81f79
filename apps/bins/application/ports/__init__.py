"""Application Ports."""

from bins.application.ports.bin_reader import BinReader, GroupingRow, LocationPair
from bins.application.ports.bin_writer import BinWriter
from bins.application.ports.rate_limiter import RateLimiterPort, RateLimitStatus

__all__ = [
    "BinReader",
    "BinWriter",
    "GroupingRow",
    "LocationPair",
    "RateLimiterPort",
    "RateLimitStatus",
]
