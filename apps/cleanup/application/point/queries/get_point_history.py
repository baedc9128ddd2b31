"""Point history queries."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from apps.cleanup.application.common.exceptions import InvalidRequestError
from apps.cleanup.domain.enums import PointType

if TYPE_CHECKING:
    from apps.cleanup.application.point.ports import PointHistoryGateway
    from apps.cleanup.domain.entities import PointHistory

DEFAULT_RECENT_LIMIT = 10


def month_range(year: int, month: int) -> tuple[datetime, datetime]:
    """[해당 월 1일, 다음 달 1일) UTC 구간."""
    if not 1 <= month <= 12:
        raise InvalidRequestError(f"Invalid month: {month}")
    start = datetime(year, month, 1, tzinfo=timezone.utc)
    if month == 12:
        end = datetime(year + 1, 1, 1, tzinfo=timezone.utc)
    else:
        end = datetime(year, month + 1, 1, tzinfo=timezone.utc)
    return start, end


class GetPointHistoryQuery:
    """원장 조회 (읽기 전용)."""

    def __init__(self, history_gateway: PointHistoryGateway) -> None:
        self._history = history_gateway

    async def all(self, user_id: int) -> list[PointHistory]:
        return await self._history.list_by_user(user_id)

    async def by_type(self, user_id: int, point_type: PointType) -> list[PointHistory]:
        return await self._history.list_by_user(user_id, point_type=point_type)

    async def between(
        self, user_id: int, start: datetime, end: datetime
    ) -> list[PointHistory]:
        if start >= end:
            raise InvalidRequestError("start must be before end")
        return await self._history.list_by_user_between(user_id, start, end)

    async def recent(self, user_id: int, limit: int = DEFAULT_RECENT_LIMIT) -> list[PointHistory]:
        if limit <= 0:
            raise InvalidRequestError("limit must be positive")
        return await self._history.list_by_user(user_id, limit=limit)

    async def monthly_earned(self, user_id: int, year: int, month: int) -> int:
        start, end = month_range(year, month)
        return await self._history.sum_delta(
            user_id, point_type=PointType.EARNED, start=start, end=end
        )
