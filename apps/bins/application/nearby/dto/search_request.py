"""Nearby Search Request DTO."""

from __future__ import annotations

from dataclasses import dataclass

from bins.domain.enums import BinType


@dataclass
class NearbySearchRequest:
    """주변 컨테이너 검색 요청 DTO.

    radius_km/limit이 None이면 정책 기본값을 사용합니다.
    """

    bin_type: BinType
    latitude: float
    longitude: float
    radius_km: float | None = None
    limit: int | None = None
