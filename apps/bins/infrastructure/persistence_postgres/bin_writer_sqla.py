"""SQLAlchemy Bin Writer Implementation."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import delete, insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bins.application.common.exceptions import QueryFailedError
from bins.application.ingestion.dto import NewBinRecord
from bins.application.ports import BinWriter
from bins.domain.enums import BinType
from bins.infrastructure.persistence_postgres.tables import bin_table


class SqlaBinWriter(BinWriter):
    """SQLAlchemy 기반 컨테이너 Writer.

    묶음마다 커밋하므로 실패한 묶음만 롤백됩니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert_batch(self, bin_type: BinType, records: Sequence[NewBinRecord]) -> int:
        if not records:
            return 0
        table = bin_table(bin_type)
        try:
            await self._session.execute(insert(table), [record.as_row() for record in records])
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise QueryFailedError("insert_batch", str(exc)) from exc
        return len(records)

    async def delete_all(self, bin_type: BinType) -> None:
        table = bin_table(bin_type)
        try:
            await self._session.execute(delete(table))
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise QueryFailedError("delete_all", str(exc)) from exc
