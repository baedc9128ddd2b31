"""Image store port."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ImageStore(ABC):
    """업로드 이미지 저장소 포트.

    store는 안정적인 참조 경로를 반환하고, fetch는 같은 참조로 바이트를 돌려줍니다.
    delete는 best-effort이며 실패 시 False를 반환합니다.
    """

    @abstractmethod
    def store(self, content: bytes, filename: str | None = None) -> str:
        """이미지를 저장하고 참조 경로를 반환합니다."""

    @abstractmethod
    def fetch(self, image_ref: str) -> bytes:
        """참조 경로의 이미지를 읽습니다.

        Raises:
            ImageNotFoundError: 이미지 없음
        """

    @abstractmethod
    def delete(self, image_ref: str) -> bool:
        """이미지를 삭제합니다."""
