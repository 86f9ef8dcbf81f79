"""Hierarchy Count DTO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HierarchyCount:
    """(district, neighborhood) 쌍별 개수."""

    district_id: int
    neighborhood_id: int | None
    count: int
