"""Bins Infrastructure Layer."""
