"""Cleanup Domain Enums."""

from apps.cleanup.domain.enums.marker import MarkerStatus
from apps.cleanup.domain.enums.photo import PhotoKind, VerdictResult, VerificationStatus
from apps.cleanup.domain.enums.point import PointType
from apps.cleanup.domain.enums.reward import RewardStatus

__all__ = [
    "MarkerStatus",
    "PhotoKind",
    "PointType",
    "RewardStatus",
    "VerdictResult",
    "VerificationStatus",
]
