"""Image storage exceptions."""

from __future__ import annotations

from apps.cleanup.application.common.exceptions.base import ApplicationError


class ImageNotFoundError(ApplicationError):
    """저장소에 이미지가 없음."""

    def __init__(self, image_ref: str) -> None:
        self.image_ref = image_ref
        super().__init__(f"Image not found: {image_ref}")


class ImageStorageError(ApplicationError):
    """이미지 저장소 장애 (저장/조회 실패)."""
