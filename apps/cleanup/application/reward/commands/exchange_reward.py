"""Exchange reward command - 포인트 → 상품권 교환."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from apps.cleanup.application.common.exceptions import InvalidRequestError
from apps.cleanup.application.reward.dto import IssuedReward
from apps.cleanup.application.reward.exceptions import (
    CodeGenerationExhaustedError,
    DuplicatePinError,
)
from apps.cleanup.domain.clock import utcnow
from apps.cleanup.domain.entities import Reward, RewardPin, mask_pin_number
from apps.cleanup.domain.services import PinGenerator

if TYPE_CHECKING:
    from apps.cleanup.application.common.ports import TransactionManager
    from apps.cleanup.application.point.services import PointLedger
    from apps.cleanup.application.reward.ports import RewardGateway, RewardPinGateway

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 10
EXCHANGE_DESCRIPTION_PREFIX = "상품권 교환 완료: "


class ExchangeRewardCommand:
    """상품권 즉시 교환 유스케이스.

    Flow (하나의 트랜잭션):
        1. 입력 검증
        2. 원장 차감 (잔액 부족 시 중단)
        3. APPROVED 상태 Reward 생성
        4. 핀번호 생성 + 저장 (중복 시 재생성, 최대 max_attempts회)
        5. 한도 소진 시 보상: 포인트 환급 + Reward 삭제 후 CodeGenerationExhaustedError
    """

    def __init__(
        self,
        ledger: PointLedger,
        reward_gateway: RewardGateway,
        pin_gateway: RewardPinGateway,
        transaction_manager: TransactionManager,
        pin_generator: PinGenerator | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._ledger = ledger
        self._rewards = reward_gateway
        self._pins = pin_gateway
        self._tx = transaction_manager
        self._generator = pin_generator or PinGenerator()
        self._max_attempts = max_attempts
        self._clock = clock

    async def execute(self, user_id: int, points: int | None, reward_type: str | None) -> IssuedReward:
        """포인트를 상품권으로 교환합니다.

        Raises:
            InvalidRequestError: 포인트/상품권 타입 오류
            InsufficientBalanceError: 잔액 부족 (상태 변경 없음)
            CodeGenerationExhaustedError: 핀번호 생성 실패 (보상 완료)
        """
        if points is None or points <= 0:
            raise InvalidRequestError("Points must be positive")
        if not reward_type or not reward_type.strip():
            raise InvalidRequestError("Reward type is required")

        log_ctx = {"user_id": user_id, "points": points, "reward_type": reward_type}
        now = self._clock()

        try:
            await self._ledger.debit(
                user_id, points, EXCHANGE_DESCRIPTION_PREFIX + reward_type
            )
        except Exception:
            await self._tx.rollback()
            raise

        reward = await self._rewards.add(
            Reward.immediate_exchange(user_id, points, reward_type, now=now)
        )
        log_ctx["reward_id"] = reward.id

        pin = await self._issue_pin(reward, now, log_ctx)
        if pin is None:
            await self._compensate(reward, log_ctx)
            raise CodeGenerationExhaustedError(self._max_attempts)

        await self._tx.commit()
        remaining = await self._ledger.replayed_balance(user_id)

        logger.info(
            "Reward exchanged",
            extra={**log_ctx, "pin": pin.masked_pin_number, "remaining_points": remaining},
        )
        return IssuedReward(reward=reward, pin=pin, remaining_points=remaining)

    async def _issue_pin(
        self, reward: Reward, now: datetime, log_ctx: dict
    ) -> RewardPin | None:
        for attempt in range(1, self._max_attempts + 1):
            pin_number = self._generator.generate()
            if await self._pins.exists_by_code(pin_number):
                logger.warning(
                    "Pin number collision",
                    extra={**log_ctx, "attempt": attempt, "pin": mask_pin_number(pin_number)},
                )
                continue
            try:
                async with self._tx.savepoint():
                    return await self._pins.add(RewardPin.issue(reward.id, pin_number, now))
            except DuplicatePinError:
                logger.warning(
                    "Pin number collision on insert",
                    extra={**log_ctx, "attempt": attempt, "pin": mask_pin_number(pin_number)},
                )
        return None

    async def _compensate(self, reward: Reward, log_ctx: dict) -> None:
        await self._ledger.refund(reward.user_id, reward.points_used)
        await self._rewards.delete(reward)
        await self._tx.commit()
        logger.error(
            "Pin generation exhausted; exchange compensated",
            extra={**log_ctx, "attempts": self._max_attempts},
        )
