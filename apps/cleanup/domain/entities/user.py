"""User entity - 포인트 보유 계정."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from apps.cleanup.domain.clock import utcnow
from apps.cleanup.domain.exceptions import InsufficientBalanceError


@dataclass
class User:
    """포인트 계정 엔티티.

    id는 인증 게이트웨이가 발급한 사용자 ID를 그대로 사용합니다.
    points는 원장(PointHistory) 합계의 캐시이며, 원장이 기준입니다.
    """

    id: int
    username: str | None = None
    points: int = 0
    created_at: datetime = field(default_factory=utcnow)

    def has_enough_points(self, amount: int) -> bool:
        return self.points >= amount

    def add_points(self, amount: int) -> None:
        if amount <= 0:
            raise ValueError("amount must be positive")
        self.points += amount

    def use_points(self, amount: int) -> None:
        if amount <= 0:
            raise ValueError("amount must be positive")
        if not self.has_enough_points(amount):
            raise InsufficientBalanceError(self.id, self.points, amount)
        self.points -= amount
