"""PointLedger - append-only 포인트 원장 서비스."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.cleanup.domain.entities import PointHistory
from apps.cleanup.domain.exceptions import InsufficientBalanceError
from apps.cleanup.domain.services import PointPolicy

if TYPE_CHECKING:
    from apps.cleanup.application.point.ports import PointHistoryGateway, UserGateway
    from apps.cleanup.domain.entities import User

logger = logging.getLogger(__name__)

EXCHANGE_CANCEL_DESCRIPTION = "상품권 교환 취소"


class PointLedger:
    """포인트 적립/차감.

    모든 변경은 새 원장 항목 추가 + 캐시 잔액(User.points) 갱신으로만 이뤄집니다.
    커밋은 호출자(유스케이스)가 담당합니다.
    """

    def __init__(
        self,
        user_gateway: UserGateway,
        history_gateway: PointHistoryGateway,
        policy: PointPolicy | None = None,
    ) -> None:
        self._users = user_gateway
        self._history = history_gateway
        self._policy = policy or PointPolicy()

    @property
    def policy(self) -> PointPolicy:
        return self._policy

    async def credit(
        self,
        user_id: int,
        base_points: int | None = None,
        confidence: float | None = None,
        *,
        related_photo_id: int | None = None,
        description: str | None = None,
    ) -> PointHistory:
        """청소 인증 포인트를 적립합니다 (기본 + 신뢰도 보너스)."""
        points = self._policy.calculate(confidence, base_points)
        user = await self._users.get_or_create_for_update(user_id)
        entry = await self._append_earned(
            user,
            points,
            description or self._policy.describe(confidence),
            related_photo_id,
        )
        logger.info(
            "Points credited",
            extra={
                "user_id": user_id,
                "points": points,
                "photo_id": related_photo_id,
                "balance": user.points,
            },
        )
        return entry

    async def refund(
        self,
        user_id: int,
        points: int,
        description: str = EXCHANGE_CANCEL_DESCRIPTION,
    ) -> PointHistory:
        """보상 트랜잭션용 적립 (보너스 없음)."""
        user = await self._users.get_or_create_for_update(user_id)
        entry = await self._append_earned(user, points, description, None)
        logger.info(
            "Points refunded",
            extra={"user_id": user_id, "points": points, "balance": user.points},
        )
        return entry

    async def debit(self, user_id: int, amount: int, reason: str) -> PointHistory:
        """포인트를 차감합니다.

        잔액은 원장 재계산 값을 기준으로 판단합니다.

        Raises:
            InsufficientBalanceError: 잔액 부족 (상태 변경 없음)
        """
        if amount <= 0:
            raise ValueError("amount must be positive")

        user = await self._users.get_for_update(user_id)
        if user is None:
            raise InsufficientBalanceError(user_id, 0, amount)

        balance = await self._history.sum_delta(user_id)
        if balance != user.points:
            logger.warning(
                "Cached balance diverged from ledger",
                extra={
                    "user_id": user_id,
                    "cached_balance": user.points,
                    "replayed_balance": balance,
                },
            )
            user.points = balance

        if balance < amount:
            raise InsufficientBalanceError(user_id, balance, amount)

        user.use_points(amount)
        entry = await self._history.append(PointHistory.used(user_id, amount, reason))
        logger.info(
            "Points debited",
            extra={"user_id": user_id, "points": amount, "balance": user.points},
        )
        return entry

    async def replayed_balance(self, user_id: int) -> int:
        return await self._history.sum_delta(user_id)

    async def _append_earned(
        self,
        user: User,
        points: int,
        description: str,
        related_photo_id: int | None,
    ) -> PointHistory:
        user.add_points(points)
        return await self._history.append(
            PointHistory.earned(
                user.id,
                points,
                description,
                related_photo_id=related_photo_id,
            )
        )
