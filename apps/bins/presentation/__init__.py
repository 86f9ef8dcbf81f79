"""Bins Presentation Layer."""
