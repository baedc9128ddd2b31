"""Verdict Value Object - 외부 Judge의 구조화된 판정."""

from __future__ import annotations

from dataclasses import dataclass

from apps.cleanup.domain.enums import VerdictResult


@dataclass(frozen=True, slots=True)
class Verdict:
    """청소 전/후 사진 비교 판정.

    Attributes:
        result: APPROVED 또는 REJECTED
        confidence: 0.0 ~ 1.0 신뢰도 (파싱 실패 시 None)
        rationale: 판단 근거
        raw_output: Judge 원본 응답 (감사용)
    """

    result: VerdictResult
    confidence: float | None
    rationale: str
    raw_output: str | None = None

    def __post_init__(self) -> None:
        if self.confidence is not None and not (0.0 <= self.confidence <= 1.0):
            raise ValueError(f"confidence out of range: {self.confidence}")

    @property
    def approved(self) -> bool:
        return self.result == VerdictResult.APPROVED

    @classmethod
    def fail_closed(cls, reason: str, raw_output: str | None = None) -> Verdict:
        """해석 불가능한 응답은 REJECTED로 처리합니다 (신뢰도 없음)."""
        return cls(
            result=VerdictResult.REJECTED,
            confidence=None,
            rationale=reason,
            raw_output=raw_output,
        )
