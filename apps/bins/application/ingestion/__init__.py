"""Ingestion Application Layer."""
