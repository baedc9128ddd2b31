"""Photo 도메인 예외."""

from apps.cleanup.domain.exceptions.base import DomainError


class VerificationGuardSkip(DomainError):
    """PENDING이 아닌 사진에 판정을 적용하려 함.

    중복 이벤트에 의한 이중 지급을 막는 가드입니다.
    호출자는 조용히 무시(no-op)하고 debug 로그만 남깁니다.
    """

    def __init__(self, photo_id: int | None, status: str) -> None:
        self.photo_id = photo_id
        self.status = status
        super().__init__(f"Photo {photo_id} is already {status}")


class PhotoNotVerifiableError(DomainError):
    """검증 대상이 아닌 사진 (BEFORE 사진)."""

    def __init__(self, photo_id: int | None) -> None:
        self.photo_id = photo_id
        super().__init__(f"Photo {photo_id} is not an AFTER photo")
