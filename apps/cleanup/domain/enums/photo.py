"""Photo 도메인 Enum."""

from enum import Enum


class PhotoKind(str, Enum):
    """사진 종류."""

    BEFORE = "BEFORE"  # 청소 전 (제보용)
    AFTER = "AFTER"  # 청소 후 (인증용)


class VerificationStatus(str, Enum):
    """사진 검증 상태."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class VerdictResult(str, Enum):
    """Judge 판정 결과."""

    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
