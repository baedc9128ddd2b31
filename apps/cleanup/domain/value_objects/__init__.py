"""Cleanup Domain Value Objects."""

from apps.cleanup.domain.value_objects.coordinates import Coordinates
from apps.cleanup.domain.value_objects.verdict import Verdict

__all__ = ["Coordinates", "Verdict"]
