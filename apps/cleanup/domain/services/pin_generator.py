"""PinGenerator - 상품권 핀번호 생성기."""

from __future__ import annotations

import random
import secrets

PIN_GROUPS = 4
PIN_GROUP_WIDTH = 4


class PinGenerator:
    """XXXX-XXXX-XXXX-XXXX 형식의 숫자 핀번호를 생성합니다.

    난수원은 주입받습니다 (테스트에서 시드 고정 가능).
    유일성 검사는 호출자(ExchangeRewardCommand)가 담당합니다.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or secrets.SystemRandom()

    def generate(self) -> str:
        upper = 10**PIN_GROUP_WIDTH
        groups = [
            f"{self._rng.randrange(upper):0{PIN_GROUP_WIDTH}d}" for _ in range(PIN_GROUPS)
        ]
        return "-".join(groups)
