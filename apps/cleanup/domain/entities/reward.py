"""Reward / RewardPin entities - 상품권 교환과 핀번호."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from apps.cleanup.domain.clock import add_years, utcnow
from apps.cleanup.domain.enums import RewardStatus
from apps.cleanup.domain.exceptions import PinAlreadyUsedError, PinExpiredError

PIN_VALIDITY_YEARS = 1
MASKED_PIN_PREFIX = "****-****-****-"
PIN_LENGTH = 19  # XXXX-XXXX-XXXX-XXXX


def mask_pin_number(pin_number: str | None) -> str:
    """마지막 그룹만 남기고 가립니다 (****-****-****-1234)."""
    if not pin_number or len(pin_number) < PIN_LENGTH:
        return MASKED_PIN_PREFIX + "****"
    return MASKED_PIN_PREFIX + pin_number[-4:]


@dataclass
class Reward:
    """상품권 교환 엔티티.

    Attributes:
        user_id: 교환한 사용자 ID
        points_used: 사용 포인트
        reward_type: 상품권 타입 (예: "FIVE_THOUSAND")
        status: 교환 상태
        processed_at: 승인 처리 시각
    """

    user_id: int
    points_used: int
    reward_type: str
    status: RewardStatus = RewardStatus.PENDING
    id: int | None = None
    created_at: datetime = field(default_factory=utcnow)
    processed_at: datetime | None = None

    @classmethod
    def immediate_exchange(
        cls,
        user_id: int,
        points_used: int,
        reward_type: str,
        now: datetime | None = None,
    ) -> Reward:
        """관리자 승인 없이 즉시 승인된 교환을 생성합니다."""
        moment = now or utcnow()
        return cls(
            user_id=user_id,
            points_used=points_used,
            reward_type=reward_type,
            status=RewardStatus.APPROVED,
            created_at=moment,
            processed_at=moment,
        )

    def is_approved(self) -> bool:
        return self.status == RewardStatus.APPROVED


@dataclass
class RewardPin:
    """상품권 핀번호 엔티티.

    Reward와 1:1이며, 사용 여부/사용 시각 외에는 변경하지 않습니다.
    """

    reward_id: int
    pin_number: str
    issued_at: datetime
    expires_at: datetime
    is_used: bool = False
    used_at: datetime | None = None
    id: int | None = None

    @classmethod
    def issue(cls, reward_id: int, pin_number: str, now: datetime | None = None) -> RewardPin:
        """핀번호를 발급합니다. 만료는 발급일로부터 1년 후입니다."""
        issued_at = now or utcnow()
        return cls(
            reward_id=reward_id,
            pin_number=pin_number,
            issued_at=issued_at,
            expires_at=add_years(issued_at, PIN_VALIDITY_YEARS),
        )

    @property
    def masked_pin_number(self) -> str:
        return mask_pin_number(self.pin_number)

    def is_expired(self, now: datetime | None = None) -> bool:
        """만료 여부. expires_at 시각 자체도 만료로 봅니다."""
        return (now or utcnow()) >= self.expires_at

    def is_available(self, now: datetime | None = None) -> bool:
        return not self.is_used and not self.is_expired(now)

    def redeem(self, now: datetime | None = None) -> None:
        """핀번호를 사용 처리합니다 (종단 상태).

        Raises:
            PinAlreadyUsedError: 이미 사용됨
            PinExpiredError: 만료됨
        """
        moment = now or utcnow()
        if self.is_used:
            raise PinAlreadyUsedError(self.id)
        if self.is_expired(moment):
            raise PinExpiredError(self.id)
        self.is_used = True
        self.used_at = moment
