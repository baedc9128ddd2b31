"""Verification event publisher port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.cleanup.application.verification.dto import PhotoUploadedEvent


class VerificationEventPublisher(Protocol):
    """업로드 커밋 이후 검증 이벤트 발행 포트.

    반드시 사진 업로드 트랜잭션이 커밋된 뒤에 호출해야 합니다.
    """

    def publish(self, event: PhotoUploadedEvent) -> None:
        """검증 이벤트를 발행합니다 (at-least-once)."""
        ...
