"""Marker 도메인 Enum."""

from enum import Enum


class MarkerStatus(str, Enum):
    """마커 상태.

    ACTIVE → CLEANED, ACTIVE/CLEANED → REMOVED 방향으로만 전이합니다.
    """

    ACTIVE = "ACTIVE"
    CLEANED = "CLEANED"
    REMOVED = "REMOVED"
