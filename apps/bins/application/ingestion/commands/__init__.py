"""Ingestion Commands."""

from bins.application.ingestion.commands.import_bins import ImportBinsCommand

__all__ = ["ImportBinsCommand"]
