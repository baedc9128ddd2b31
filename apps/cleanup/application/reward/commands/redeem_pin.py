"""Redeem pin command - 핀번호 사용."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from apps.cleanup.domain.clock import utcnow
from apps.cleanup.domain.entities import RewardPin, mask_pin_number
from apps.cleanup.domain.exceptions import InvalidPinError

if TYPE_CHECKING:
    from apps.cleanup.application.common.ports import TransactionManager
    from apps.cleanup.application.reward.ports import RewardPinGateway

logger = logging.getLogger(__name__)


class RedeemPinCommand:
    """핀번호 사용 유스케이스 (종단 상태)."""

    def __init__(
        self,
        pin_gateway: RewardPinGateway,
        transaction_manager: TransactionManager,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._pins = pin_gateway
        self._tx = transaction_manager
        self._clock = clock

    async def execute(self, pin_number: str) -> RewardPin:
        """핀번호를 사용 처리합니다.

        Raises:
            InvalidPinError: 일치하는 핀번호 없음
            PinAlreadyUsedError: 이미 사용됨
            PinExpiredError: 만료됨
        """
        code = (pin_number or "").strip()
        pin = await self._pins.get_by_code_for_update(code) if code else None
        if pin is None:
            raise InvalidPinError()

        try:
            pin.redeem(self._clock())
        except Exception:
            await self._tx.rollback()
            raise
        await self._tx.commit()

        logger.info(
            "Pin redeemed",
            extra={"pin_id": pin.id, "reward_id": pin.reward_id, "pin": mask_pin_number(code)},
        )
        return pin
