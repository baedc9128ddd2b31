"""PointHistory entity - 포인트 원장 항목."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from apps.cleanup.domain.clock import utcnow
from apps.cleanup.domain.enums import PointType


@dataclass
class PointHistory:
    """포인트 원장 항목 (append-only).

    생성 후 수정하지 않습니다. delta는 부호 있는 값입니다
    (EARNED는 양수, USED는 음수).

    Attributes:
        user_id: 사용자 ID
        delta: 포인트 증감
        type: EARNED / USED
        description: 사유
        related_photo_id: 적립 근거 사진 (선택)
    """

    user_id: int
    delta: int
    type: PointType
    description: str
    related_photo_id: int | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=utcnow)

    @classmethod
    def earned(
        cls,
        user_id: int,
        points: int,
        description: str,
        related_photo_id: int | None = None,
    ) -> PointHistory:
        if points <= 0:
            raise ValueError("earned points must be positive")
        return cls(
            user_id=user_id,
            delta=points,
            type=PointType.EARNED,
            description=description,
            related_photo_id=related_photo_id,
        )

    @classmethod
    def used(cls, user_id: int, points: int, description: str) -> PointHistory:
        if points <= 0:
            raise ValueError("used points must be positive")
        return cls(
            user_id=user_id,
            delta=-points,
            type=PointType.USED,
            description=description,
        )

    @property
    def amount(self) -> int:
        """부호 없는 포인트 양."""
        return abs(self.delta)
