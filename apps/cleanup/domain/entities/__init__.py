"""Cleanup Domain Entities."""

from apps.cleanup.domain.entities.marker import Marker
from apps.cleanup.domain.entities.photo import Photo
from apps.cleanup.domain.entities.point_history import PointHistory
from apps.cleanup.domain.entities.reward import Reward, RewardPin, mask_pin_number
from apps.cleanup.domain.entities.user import User

__all__ = [
    "Marker",
    "Photo",
    "PointHistory",
    "Reward",
    "RewardPin",
    "User",
    "mask_pin_number",
]
