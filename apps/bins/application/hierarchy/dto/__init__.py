"""Hierarchy DTOs."""

from bins.application.hierarchy.dto.hierarchy_count import HierarchyCount

__all__ = ["HierarchyCount"]
