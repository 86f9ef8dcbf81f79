"""Bins Application Layer."""
