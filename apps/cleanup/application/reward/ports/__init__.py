"""Reward gateway ports (interfaces)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.cleanup.domain.entities import Reward, RewardPin


class RewardGateway(Protocol):
    """상품권 교환 포트."""

    async def add(self, reward: Reward) -> Reward:
        ...

    async def delete(self, reward: Reward) -> None:
        ...

    async def get_by_id(self, reward_id: int) -> Reward | None:
        ...

    async def list_by_user(self, user_id: int) -> list[Reward]:
        """최신순으로 조회합니다."""
        ...


class RewardPinGateway(Protocol):
    """핀번호 포트."""

    async def exists_by_code(self, pin_number: str) -> bool:
        ...

    async def add(self, pin: RewardPin) -> RewardPin:
        """핀번호를 저장합니다.

        Raises:
            DuplicatePinError: 핀번호 중복
        """
        ...

    async def get_by_code_for_update(self, pin_number: str) -> RewardPin | None:
        ...

    async def get_by_reward_id(self, reward_id: int) -> RewardPin | None:
        ...

    async def list_by_user(self, user_id: int, used: bool | None = None) -> list[RewardPin]:
        """사용자의 핀번호를 발급 최신순으로 조회합니다."""
        ...


__all__ = ["RewardGateway", "RewardPinGateway"]
