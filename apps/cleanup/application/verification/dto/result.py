"""Verification result DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class VerificationOutcome(str, Enum):
    """검증 처리 결과."""

    VERIFIED = "VERIFIED"
    NOTHING_TO_VERIFY = "NOTHING_TO_VERIFY"
    ALREADY_VERIFIED = "ALREADY_VERIFIED"
    NOT_AFTER_UPLOAD = "NOT_AFTER_UPLOAD"
    MARKER_UNAVAILABLE = "MARKER_UNAVAILABLE"
    IMAGE_MISSING = "IMAGE_MISSING"
    JUDGE_UNAVAILABLE = "JUDGE_UNAVAILABLE"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    JUDGE_REQUEST_FAILED = "JUDGE_REQUEST_FAILED"


# 재전달로 회복될 수 있는 결과
RETRYABLE_OUTCOMES = frozenset(
    {VerificationOutcome.JUDGE_UNAVAILABLE, VerificationOutcome.STORAGE_UNAVAILABLE}
)


@dataclass
class VerificationResult:
    """Orchestrator 실행 결과."""

    outcome: VerificationOutcome
    marker_id: int
    photo_id: int | None = None
    verdict: str | None = None
    confidence: float | None = None
    marker_cleaned: bool = False
    points_awarded: int = 0
    award_failed: bool = False

    @property
    def retryable(self) -> bool:
        return self.outcome in RETRYABLE_OUTCOMES

    def to_dict(self) -> dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "marker_id": self.marker_id,
            "photo_id": self.photo_id,
            "verdict": self.verdict,
            "confidence": self.confidence,
            "marker_cleaned": self.marker_cleaned,
            "points_awarded": self.points_awarded,
            "award_failed": self.award_failed,
        }


@dataclass
class VerificationStatusDTO:
    """마커 검증 상태 조회 결과."""

    marker_id: int
    marker_status: str
    photo_counts: dict[str, int] = field(default_factory=dict)
    verification_status: str | None = None
    photo_id: int | None = None
    confidence: float | None = None
    rationale: str | None = None
    verified_at: datetime | None = None


@dataclass
class VerificationRequestDTO:
    """수동 재검증 요청 결과."""

    marker_id: int
    photo_id: int
    verification_status: str
    verification_requested: bool
