"""Ingestion DTOs."""

from bins.application.ingestion.dto.import_result import BatchError, ImportResult
from bins.application.ingestion.dto.new_bin_record import NewBinRecord

__all__ = ["BatchError", "ImportResult", "NewBinRecord"]
