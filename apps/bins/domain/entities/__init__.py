"""Domain Entities."""

from bins.domain.entities.bin_record import BinRecord

__all__ = ["BinRecord"]
