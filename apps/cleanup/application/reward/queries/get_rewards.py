"""Reward queries. 핀번호는 항상 마스킹해서 반환합니다."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.cleanup.application.common.exceptions import RewardNotFoundError
from apps.cleanup.application.reward.dto import PinView, RewardView

if TYPE_CHECKING:
    from apps.cleanup.application.reward.ports import RewardGateway, RewardPinGateway


class GetRewardsQuery:
    """상품권 교환 내역 조회."""

    def __init__(self, reward_gateway: RewardGateway, pin_gateway: RewardPinGateway) -> None:
        self._rewards = reward_gateway
        self._pins = pin_gateway

    async def list_by_user(self, user_id: int) -> list[RewardView]:
        rewards = await self._rewards.list_by_user(user_id)
        return [
            RewardView.from_entity(reward, await self._pins.get_by_reward_id(reward.id))
            for reward in rewards
        ]

    async def get(self, user_id: int, reward_id: int) -> RewardView:
        reward = await self._rewards.get_by_id(reward_id)
        if reward is None or reward.user_id != user_id:
            raise RewardNotFoundError(reward_id)
        return RewardView.from_entity(reward, await self._pins.get_by_reward_id(reward_id))

    async def available_pins(self, user_id: int) -> list[PinView]:
        pins = await self._pins.list_by_user(user_id, used=False)
        return [PinView.from_entity(p) for p in pins if not p.is_expired()]

    async def used_pins(self, user_id: int) -> list[PinView]:
        pins = await self._pins.list_by_user(user_id, used=True)
        return [PinView.from_entity(p) for p in pins]
