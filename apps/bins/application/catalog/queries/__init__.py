"""Catalog Queries."""

from bins.application.catalog.queries.count_bins import CountBinsQuery
from bins.application.catalog.queries.list_bins import ListBinsQuery
from bins.application.catalog.queries.list_bins_by_location import ListBinsByLocationQuery

__all__ = ["CountBinsQuery", "ListBinsByLocationQuery", "ListBinsQuery"]
