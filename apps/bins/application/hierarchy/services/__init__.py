"""Hierarchy Services."""

from bins.application.hierarchy.services.hierarchy_counter import HierarchyCounter

__all__ = ["HierarchyCounter"]
