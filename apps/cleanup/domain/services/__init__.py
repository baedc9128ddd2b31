"""Cleanup Domain Services."""

from apps.cleanup.domain.services.pin_generator import PinGenerator
from apps.cleanup.domain.services.point_policy import PointPolicy

__all__ = ["PinGenerator", "PointPolicy"]
