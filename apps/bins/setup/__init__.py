"""Setup Module."""

from bins.setup.config import Settings, get_settings
from bins.setup.database import async_session_factory, get_db_session
from bins.setup.dependencies import (
    get_bin_reader,
    get_find_nearby_bins_query,
)

__all__ = [
    "Settings",
    "get_settings",
    "async_session_factory",
    "get_db_session",
    "get_bin_reader",
    "get_find_nearby_bins_query",
]
