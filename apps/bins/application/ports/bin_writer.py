"""Bin Writer Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from bins.application.ingestion.dto import NewBinRecord
from bins.domain.enums import BinType


class BinWriter(ABC):
    """컨테이너 적재 포트 (ingestion 전용)."""

    @abstractmethod
    async def insert_batch(self, bin_type: BinType, records: Sequence[NewBinRecord]) -> int:
        """레코드 묶음을 삽입하고 삽입된 수를 반환합니다.

        Raises:
            QueryFailedError: 묶음 전체가 실패했을 때
        """
        ...

    @abstractmethod
    async def delete_all(self, bin_type: BinType) -> None:
        """컬렉션의 모든 레코드를 삭제합니다."""
        ...
