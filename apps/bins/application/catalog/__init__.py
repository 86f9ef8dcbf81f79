"""Catalog (list/count) Application Layer."""

from bins.application.catalog.queries import (
    CountBinsQuery,
    ListBinsByLocationQuery,
    ListBinsQuery,
)

__all__ = ["CountBinsQuery", "ListBinsByLocationQuery", "ListBinsQuery"]
