"""Centroid Accumulator Service.

그룹별 개수와 좌표 합을 누적해 산술평균 중심점을 계산합니다.
측지학적 중심이 아닌 단순 평균이며 도시 규모에서만 유효한 근사입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Hashable, Iterator, TypeVar

from bins.domain.value_objects import GeoPoint

K = TypeVar("K", bound=Hashable)


@dataclass
class _Bucket:
    count: int = 0
    sum_lat: float = 0.0
    sum_lng: float = 0.0


@dataclass
class CentroidAccumulator(Generic[K]):
    """그룹 키별 누적기.

    add()가 호출된 키만 존재하므로 모든 그룹의 count는 1 이상입니다.
    """

    _buckets: dict[K, _Bucket] = field(default_factory=dict)

    def add(self, key: K, lat: float, lng: float) -> None:
        bucket = self._buckets.get(key)
        if bucket is None:
            bucket = self._buckets[key] = _Bucket()
        bucket.count += 1
        bucket.sum_lat += lat
        bucket.sum_lng += lng

    def __len__(self) -> int:
        return len(self._buckets)

    def results(self) -> Iterator[tuple[K, int, GeoPoint]]:
        """(키, 개수, 중심점)을 키 순서대로 반환합니다."""
        for key in sorted(self._buckets, key=_sort_key):
            bucket = self._buckets[key]
            centroid = GeoPoint(
                lat=bucket.sum_lat / bucket.count,
                lng=bucket.sum_lng / bucket.count,
            )
            yield key, bucket.count, centroid


def _sort_key(key: Hashable) -> tuple:
    # None은 같은 위치의 정수 값들 뒤에 정렬
    parts = key if isinstance(key, tuple) else (key,)
    return tuple((part is None, part if part is not None else 0) for part in parts)
