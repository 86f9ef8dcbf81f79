"""Bin Type Enum."""

from __future__ import annotations

from enum import Enum


class BinType(str, Enum):
    """컨테이너 종류.

    값은 그대로 테이블(컬렉션) 이름으로 사용됩니다.
    """

    CLOTHING = "clothing_bins"
    OIL = "oil_bins"
    GLASS = "glass_bins"
    PAPER = "paper_bins"
    PLASTIC = "plastic_bins"
    ORGANIC = "organic_bins"
    BATTERY = "battery_bins"
    OTHER = "other_bins"

    @property
    def table_name(self) -> str:
        return self.value
