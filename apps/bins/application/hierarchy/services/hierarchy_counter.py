"""Hierarchy Counter Service."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from bins.application.hierarchy.dto import HierarchyCount
from bins.application.ports import LocationPair


class HierarchyCounter:
    """(district, neighborhood) 쌍 그룹핑 서비스."""

    @staticmethod
    def count(pairs: Iterable[LocationPair]) -> list[HierarchyCount]:
        """쌍별 개수를 district, neighborhood 순으로 반환합니다.

        neighborhood가 None인 쌍은 독립된 그룹이며 같은 district의
        다른 그룹과 합쳐지지 않습니다. None 그룹은 district 안에서 마지막입니다.
        """
        counts = Counter((pair.district_id, pair.neighborhood_id) for pair in pairs)
        ordered = sorted(
            counts.items(),
            key=lambda item: (item[0][0], item[0][1] is None, item[0][1] or 0),
        )
        return [
            HierarchyCount(district_id=district_id, neighborhood_id=neighborhood_id, count=count)
            for (district_id, neighborhood_id), count in ordered
        ]
