"""Offline jobs (CSV import)."""
