"""Point statistics / reconciliation queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.cleanup.application.point.dto import PointStatisticsDTO, ReconciliationDTO
from apps.cleanup.domain.enums import PointType

if TYPE_CHECKING:
    from apps.cleanup.application.point.ports import PointHistoryGateway, UserGateway


class GetPointStatisticsQuery:
    """포인트 통계와 잔액 정합성 조회."""

    def __init__(
        self,
        user_gateway: UserGateway,
        history_gateway: PointHistoryGateway,
    ) -> None:
        self._users = user_gateway
        self._history = history_gateway

    async def statistics(self, user_id: int) -> PointStatisticsDTO:
        """적립/사용 합계, 캐시 잔액, 원장 기준 사용 가능 잔액."""
        earned = await self._history.sum_delta(user_id, point_type=PointType.EARNED)
        used = await self._history.sum_delta(user_id, point_type=PointType.USED)
        user = await self._users.get_by_id(user_id)
        return PointStatisticsDTO(
            total_earned=earned,
            total_used=-used,
            current_points=user.points if user else 0,
            available_points=earned + used,
        )

    async def reconcile(self, user_id: int) -> ReconciliationDTO:
        user = await self._users.get_by_id(user_id)
        replayed = await self._history.sum_delta(user_id)
        return ReconciliationDTO(
            user_id=user_id,
            cached_balance=user.points if user else 0,
            replayed_balance=replayed,
        )
