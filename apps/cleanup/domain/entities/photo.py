"""Photo entity - 청소 전/후 사진."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from apps.cleanup.domain.clock import utcnow
from apps.cleanup.domain.enums import PhotoKind, VerificationStatus
from apps.cleanup.domain.exceptions import PhotoNotVerifiableError, VerificationGuardSkip
from apps.cleanup.domain.value_objects import Verdict


@dataclass
class Photo:
    """사진 엔티티.

    AFTER 사진은 PENDING으로 생성되어 APPROVED/REJECTED로 정확히 한 번 전이합니다.
    전이는 종단 상태이며 재검증하지 않습니다.

    Attributes:
        marker_id: 소속 마커 ID
        uploaded_by: 업로드한 사용자 ID
        image_ref: 이미지 저장소 참조 경로
        kind: BEFORE / AFTER
        verification_status: 검증 상태
        judge_raw_output: Judge 원본 응답
        confidence: 판정 신뢰도
        rationale: 판정 근거
        verified_at: 판정 시각
    """

    marker_id: int
    uploaded_by: int
    image_ref: str
    kind: PhotoKind
    verification_status: VerificationStatus = VerificationStatus.PENDING
    judge_raw_output: str | None = None
    confidence: float | None = None
    rationale: str | None = None
    verified_at: datetime | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=utcnow)

    def is_before(self) -> bool:
        return self.kind == PhotoKind.BEFORE

    def is_after(self) -> bool:
        return self.kind == PhotoKind.AFTER

    def is_pending(self) -> bool:
        return self.verification_status == VerificationStatus.PENDING

    def is_approved(self) -> bool:
        return self.verification_status == VerificationStatus.APPROVED

    def is_verified(self) -> bool:
        return self.verification_status != VerificationStatus.PENDING

    def apply_verdict(self, verdict: Verdict, now: datetime | None = None) -> None:
        """판정을 적용합니다.

        Raises:
            PhotoNotVerifiableError: AFTER 사진이 아님
            VerificationGuardSkip: 이미 판정된 사진
        """
        if not self.is_after():
            raise PhotoNotVerifiableError(self.id)
        if not self.is_pending():
            raise VerificationGuardSkip(self.id, self.verification_status.value)

        self.verification_status = (
            VerificationStatus.APPROVED if verdict.approved else VerificationStatus.REJECTED
        )
        self.judge_raw_output = verdict.raw_output
        self.confidence = verdict.confidence
        self.rationale = verdict.rationale
        self.verified_at = now or utcnow()
