"""Geodesic arithmetic.

거리 단위는 미터로 통일합니다. km는 API 경계에서만 변환합니다.
"""

from __future__ import annotations

import math
from typing import NamedTuple

EARTH_RADIUS_M = 6_371_000.0
# 자오선 1도 ≈ 111 km (적도 기준 근사)
KM_PER_DEGREE = 111.0
# 경도 전체 폭의 절반. 이보다 큰 delta는 경도 필터가 없는 것과 같다.
MAX_LNG_DELTA_DEG = 180.0


class DegreeDelta(NamedTuple):
    """반경을 위도/경도 도 단위 폭으로 환산한 값."""

    lat_delta: float
    lng_delta: float


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """두 좌표 사이의 대원 거리(미터)를 Haversine 공식으로 계산합니다.

    Args:
        lat1: 첫 번째 지점 위도
        lng1: 첫 번째 지점 경도
        lat2: 두 번째 지점 위도
        lng2: 두 번째 지점 경도

    Returns:
        거리 (m)
    """
    d_lat = to_radians(lat2 - lat1)
    d_lng = to_radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(to_radians(lat1)) * math.cos(to_radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    # 부동소수점 오차로 sqrt(a)가 1을 넘으면 asin이 ValueError를 던진다
    return 2 * EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(a)))


def bounding_box_for_radius(radius_km: float, latitude: float) -> DegreeDelta:
    """반경(km)을 기준 위도에서의 위도/경도 폭(도)으로 변환합니다.

    사전 필터용 근사치이며 최종 순위에는 사용하지 않습니다.
    극점 근처에서는 cos(latitude)가 0에 가까워지므로 경도 폭을
    MAX_LNG_DELTA_DEG로 제한합니다.
    """
    lat_delta = radius_km / KM_PER_DEGREE
    cos_lat = math.cos(to_radians(latitude))
    if cos_lat <= 0 or radius_km / (KM_PER_DEGREE * cos_lat) > MAX_LNG_DELTA_DEG:
        return DegreeDelta(lat_delta=lat_delta, lng_delta=MAX_LNG_DELTA_DEG)
    return DegreeDelta(lat_delta=lat_delta, lng_delta=radius_km / (KM_PER_DEGREE * cos_lat))
