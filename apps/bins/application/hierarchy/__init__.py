"""Hierarchy Counts Application Layer."""

from bins.application.hierarchy.dto import HierarchyCount
from bins.application.hierarchy.queries import GetCountsHierarchyQuery
from bins.application.hierarchy.services import HierarchyCounter

__all__ = ["HierarchyCount", "GetCountsHierarchyQuery", "HierarchyCounter"]
