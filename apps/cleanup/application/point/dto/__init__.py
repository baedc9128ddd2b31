"""Point DTOs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PointStatisticsDTO:
    """포인트 통계."""

    total_earned: int
    total_used: int
    current_points: int
    available_points: int


@dataclass(frozen=True)
class ReconciliationDTO:
    """캐시 잔액과 원장 재계산 잔액 비교."""

    user_id: int
    cached_balance: int
    replayed_balance: int

    @property
    def consistent(self) -> bool:
        return self.cached_balance == self.replayed_balance


__all__ = ["PointStatisticsDTO", "ReconciliationDTO"]
