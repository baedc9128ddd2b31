"""SQLAlchemy implementation of reward gateways."""

from __future__ import annotations

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.cleanup.application.reward.exceptions import DuplicatePinError
from apps.cleanup.domain.entities import Reward, RewardPin


class SqlaRewardGateway:
    """상품권 교환 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, reward: Reward) -> Reward:
        self._session.add(reward)
        await self._session.flush()
        return reward

    async def delete(self, reward: Reward) -> None:
        await self._session.delete(reward)
        await self._session.flush()

    async def get_by_id(self, reward_id: int) -> Reward | None:
        return await self._session.get(Reward, reward_id)

    async def list_by_user(self, user_id: int) -> list[Reward]:
        result = await self._session.execute(
            select(Reward)
            .where(Reward.user_id == user_id)
            .order_by(Reward.created_at.desc(), Reward.id.desc())
        )
        return list(result.scalars().all())


class SqlaRewardPinGateway:
    """핀번호 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def exists_by_code(self, pin_number: str) -> bool:
        result = await self._session.execute(
            select(exists().where(RewardPin.pin_number == pin_number))
        )
        return bool(result.scalar())

    async def add(self, pin: RewardPin) -> RewardPin:
        self._session.add(pin)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise DuplicatePinError() from exc
        return pin

    async def get_by_code_for_update(self, pin_number: str) -> RewardPin | None:
        result = await self._session.execute(
            select(RewardPin)
            .where(RewardPin.pin_number == pin_number)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_by_reward_id(self, reward_id: int) -> RewardPin | None:
        result = await self._session.execute(
            select(RewardPin).where(RewardPin.reward_id == reward_id)
        )
        return result.scalar_one_or_none()

    async def list_by_user(self, user_id: int, used: bool | None = None) -> list[RewardPin]:
        stmt = (
            select(RewardPin)
            .join(Reward, Reward.id == RewardPin.reward_id)
            .where(Reward.user_id == user_id)
        )
        if used is not None:
            stmt = stmt.where(RewardPin.is_used.is_(used))
        result = await self._session.execute(
            stmt.order_by(RewardPin.issued_at.desc(), RewardPin.id.desc())
        )
        return list(result.scalars().all())
