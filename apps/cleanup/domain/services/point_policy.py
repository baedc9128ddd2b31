"""PointPolicy - 청소 인증 포인트 산정 규칙."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BASE_POINTS = 100
DEFAULT_BONUS_POINTS = 20
DEFAULT_BONUS_THRESHOLD = 0.8


@dataclass(frozen=True)
class PointPolicy:
    """기본 포인트 + 신뢰도 보너스.

    보너스는 confidence >= bonus_threshold 일 때만 지급합니다.
    신뢰도가 없으면(None) 보너스 없음.
    """

    base_points: int = DEFAULT_BASE_POINTS
    bonus_points: int = DEFAULT_BONUS_POINTS
    bonus_threshold: float = DEFAULT_BONUS_THRESHOLD

    def bonus_for(self, confidence: float | None) -> int:
        if confidence is not None and confidence >= self.bonus_threshold:
            return self.bonus_points
        return 0

    def calculate(self, confidence: float | None, base_points: int | None = None) -> int:
        base = self.base_points if base_points is None else base_points
        return base + self.bonus_for(confidence)

    @staticmethod
    def describe(confidence: float | None) -> str:
        """원장 항목 사유 문자열."""
        if confidence is None:
            return "청소 인증 완료"
        return f"청소 인증 완료 (신뢰도: {confidence * 100:.0f}%)"
