"""PostgreSQL Infrastructure."""

from bins.infrastructure.persistence_postgres.bin_reader_sqla import SqlaBinReader
from bins.infrastructure.persistence_postgres.bin_writer_sqla import SqlaBinWriter
from bins.infrastructure.persistence_postgres.tables import BIN_TABLES, bin_table, metadata

__all__ = ["SqlaBinReader", "SqlaBinWriter", "BIN_TABLES", "bin_table", "metadata"]
