"""Hierarchy Queries."""

from bins.application.hierarchy.queries.get_counts_hierarchy import GetCountsHierarchyQuery

__all__ = ["GetCountsHierarchyQuery"]
