"""Reward 도메인 Enum."""

from enum import Enum


class RewardStatus(str, Enum):
    """상품권 교환 상태.

    즉시 교환 플로우에서는 APPROVED로만 생성됩니다.
    PENDING, REJECTED는 하위 호환을 위해 유지합니다.
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
