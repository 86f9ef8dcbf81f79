"""Nearby Policy Service.

반경/결과 수 보정 정책입니다. Port 의존성이 없는 순수 로직입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_RADIUS_KM = 5.0
MIN_RADIUS_KM = 0.05
MAX_RADIUS_KM = 50.0
DEFAULT_LIMIT = 100
MAX_LIMIT = 5000
OVERFETCH_FACTOR = 2
MAX_CANDIDATES = 50_000


class NearbyStrategy(str, Enum):
    """주변 검색 전략."""

    AUTO = "auto"
    NATIVE = "native"
    IN_PROCESS = "in_process"


@dataclass(frozen=True)
class NearbyPolicyService:
    """주변 검색 정책.

    반경과 limit은 거부하지 않고 설정된 범위로 보정(clamp)합니다.
    """

    default_radius_km: float = DEFAULT_RADIUS_KM
    min_radius_km: float = MIN_RADIUS_KM
    max_radius_km: float = MAX_RADIUS_KM
    default_limit: int = DEFAULT_LIMIT
    max_limit: int = MAX_LIMIT
    overfetch_factor: int = OVERFETCH_FACTOR
    max_candidates: int = MAX_CANDIDATES
    strategy: NearbyStrategy = NearbyStrategy.AUTO

    def effective_radius_km(self, radius_km: float | None) -> float:
        if radius_km is None:
            radius_km = self.default_radius_km
        return max(self.min_radius_km, min(radius_km, self.max_radius_km))

    def effective_limit(self, limit: int | None) -> int:
        if limit is None:
            limit = self.default_limit
        return max(1, min(limit, self.max_limit))

    def initial_fetch_size(self, limit: int) -> int:
        """초기 후보 수 (bbox 모서리는 원 밖이므로 과다 조회)."""
        return min(max(limit * self.overfetch_factor, limit), self.max_candidates)
