"""Import Bins Command.

컬렉션을 비우고(선택) 레코드를 묶음 단위로 적재합니다.
묶음 하나가 실패해도 나머지 적재는 계속됩니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from bins.application.common.exceptions import QueryFailedError
from bins.application.ingestion.dto import BatchError, ImportResult, NewBinRecord
from bins.domain.enums import BinType

if TYPE_CHECKING:
    from bins.application.ports import BinWriter

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 1000


class ImportBinsCommand:
    """컨테이너 일괄 적재 Command."""

    def __init__(self, bin_writer: "BinWriter", batch_size: int = DEFAULT_BATCH_SIZE) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be positive")
        self._writer = bin_writer
        self._batch_size = batch_size

    async def execute(
        self,
        bin_type: BinType,
        records: Sequence[NewBinRecord],
        *,
        replace: bool = True,
    ) -> ImportResult:
        """레코드를 적재합니다.

        Args:
            bin_type: 대상 컬렉션
            records: 적재할 레코드
            replace: True면 적재 전에 컬렉션을 비웁니다

        Returns:
            삽입 수와 실패한 묶음 목록

        Raises:
            QueryFailedError: 컬렉션 비우기에 실패했을 때
        """
        if replace:
            await self._writer.delete_all(bin_type)
            logger.info("Collection cleared", extra={"bin_type": bin_type.value})

        result = ImportResult()
        for start in range(0, len(records), self._batch_size):
            batch = records[start : start + self._batch_size]
            batch_number = start // self._batch_size + 1
            try:
                result.inserted += await self._writer.insert_batch(bin_type, batch)
            except QueryFailedError as exc:
                logger.error(
                    "Batch insert failed",
                    extra={"bin_type": bin_type.value, "batch": batch_number, "error": exc.reason},
                )
                result.errors.append(BatchError(batch=batch_number, size=len(batch), error=exc.reason))

        logger.info(
            "Import completed",
            extra={
                "bin_type": bin_type.value,
                "inserted": result.inserted,
                "failed_batches": len(result.errors),
            },
        )
        return result
