"""Reward DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from apps.cleanup.domain.entities import Reward, RewardPin


@dataclass(frozen=True)
class PinView:
    """마스킹된 핀번호 정보."""

    pin_id: int | None
    reward_id: int
    masked_pin_number: str
    issued_at: datetime
    expires_at: datetime
    is_used: bool
    used_at: datetime | None

    @classmethod
    def from_entity(cls, pin: RewardPin) -> PinView:
        return cls(
            pin_id=pin.id,
            reward_id=pin.reward_id,
            masked_pin_number=pin.masked_pin_number,
            issued_at=pin.issued_at,
            expires_at=pin.expires_at,
            is_used=pin.is_used,
            used_at=pin.used_at,
        )


@dataclass(frozen=True)
class RewardView:
    """상품권 교환 내역 (핀번호는 마스킹)."""

    reward_id: int | None
    user_id: int
    points_used: int
    reward_type: str
    status: str
    created_at: datetime
    processed_at: datetime | None
    pin: PinView | None

    @classmethod
    def from_entity(cls, reward: Reward, pin: RewardPin | None) -> RewardView:
        return cls(
            reward_id=reward.id,
            user_id=reward.user_id,
            points_used=reward.points_used,
            reward_type=reward.reward_type,
            status=reward.status.value,
            created_at=reward.created_at,
            processed_at=reward.processed_at,
            pin=PinView.from_entity(pin) if pin else None,
        )


@dataclass(frozen=True)
class IssuedReward:
    """교환 직후 응답. 전체 핀번호는 이 시점에만 노출됩니다."""

    reward: Reward
    pin: RewardPin
    remaining_points: int

    @property
    def pin_number(self) -> str:
        return self.pin.pin_number


__all__ = ["IssuedReward", "PinView", "RewardView"]
