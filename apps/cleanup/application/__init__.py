"""Cleanup Application Layer."""
