"""Cleanup Domain Layer."""
