"""Point 도메인 Enum."""

from enum import Enum


class PointType(str, Enum):
    """포인트 이력 타입."""

    EARNED = "EARNED"
    USED = "USED"
