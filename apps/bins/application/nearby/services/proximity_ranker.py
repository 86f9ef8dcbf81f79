"""Proximity Ranker Service.

후보 레코드를 정확한 Haversine 거리로 재정렬합니다.
"""

from __future__ import annotations

from typing import Iterable

from bins.domain.entities import BinRecord
from bins.domain.services import haversine_distance
from bins.domain.value_objects import GeoPoint


class ProximityRanker:
    """거리 기반 재정렬 서비스."""

    @staticmethod
    def rank(
        candidates: Iterable[BinRecord],
        center: GeoPoint,
        radius_m: float,
    ) -> list[tuple[BinRecord, float]]:
        """반경 밖 후보를 제거하고 거리 오름차순으로 정렬합니다.

        좌표가 없는 후보는 거리 계산 전에 제외합니다. 정렬은 안정 정렬이므로
        같은 거리의 후보는 입력 순서를 유지합니다.
        """
        ranked: list[tuple[BinRecord, float]] = []
        for record in candidates:
            if record.lat is None or record.lng is None:
                continue
            distance = haversine_distance(center.lat, center.lng, record.lat, record.lng)
            if distance <= radius_m:
                ranked.append((record, distance))
        ranked.sort(key=lambda item: item[1])
        return ranked
