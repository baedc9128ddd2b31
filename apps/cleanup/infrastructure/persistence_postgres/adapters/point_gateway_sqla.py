"""SQLAlchemy implementation of point ledger gateways."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from apps.cleanup.domain.entities import PointHistory, User
from apps.cleanup.domain.enums import PointType
from apps.cleanup.infrastructure.persistence_postgres.mappings import users_table


class SqlaUserGateway:
    """포인트 계정 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: int) -> User | None:
        return await self._session.get(User, user_id)

    async def get_for_update(self, user_id: int) -> User | None:
        result = await self._session.execute(
            select(User)
            .where(User.id == user_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_or_create_for_update(self, user_id: int) -> User:
        # 동시 생성 경합은 ON CONFLICT DO NOTHING으로 흡수
        await self._session.execute(
            pg_insert(users_table)
            .values(id=user_id, points=0)
            .on_conflict_do_nothing(index_elements=["id"])
        )
        user = await self.get_for_update(user_id)
        if user is None:
            raise RuntimeError(f"Point account {user_id} could not be created")
        return user


class SqlaPointHistoryGateway:
    """포인트 원장 게이트웨이 SQLAlchemy 구현 (INSERT/SELECT만 사용)."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def append(self, entry: PointHistory) -> PointHistory:
        self._session.add(entry)
        await self._session.flush()
        return entry

    async def list_by_user(
        self,
        user_id: int,
        point_type: PointType | None = None,
        limit: int | None = None,
    ) -> list[PointHistory]:
        stmt = select(PointHistory).where(PointHistory.user_id == user_id)
        if point_type is not None:
            stmt = stmt.where(PointHistory.type == point_type)
        stmt = stmt.order_by(PointHistory.created_at.desc(), PointHistory.id.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_user_between(
        self, user_id: int, start: datetime, end: datetime
    ) -> list[PointHistory]:
        result = await self._session.execute(
            select(PointHistory)
            .where(
                PointHistory.user_id == user_id,
                PointHistory.created_at >= start,
                PointHistory.created_at < end,
            )
            .order_by(PointHistory.created_at.desc(), PointHistory.id.desc())
        )
        return list(result.scalars().all())

    async def sum_delta(
        self,
        user_id: int,
        point_type: PointType | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> int:
        stmt = select(func.coalesce(func.sum(PointHistory.delta), 0)).where(
            PointHistory.user_id == user_id
        )
        if point_type is not None:
            stmt = stmt.where(PointHistory.type == point_type)
        if start is not None:
            stmt = stmt.where(PointHistory.created_at >= start)
        if end is not None:
            stmt = stmt.where(PointHistory.created_at < end)
        result = await self._session.execute(stmt)
        return int(result.scalar_one())
