"""Photo gateway ports (interfaces)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.cleanup.domain.entities import Photo
    from apps.cleanup.domain.enums import PhotoKind


class PhotoQueryGateway(Protocol):
    """사진 조회 포트."""

    async def list_by_marker(self, marker_id: int, kind: PhotoKind | None = None) -> list[Photo]:
        """마커의 사진을 (created_at, id) 오름차순으로 조회합니다."""
        ...

    async def count_by_kind(self, marker_id: int) -> dict[PhotoKind, int]:
        ...


class PhotoCommandGateway(Protocol):
    """사진 수정 포트."""

    async def add_all(self, photos: list[Photo]) -> list[Photo]:
        ...

    async def get_for_update(self, photo_id: int) -> Photo | None:
        """행 잠금과 함께 최신 상태로 조회합니다."""
        ...

    async def delete_by_marker(self, marker_id: int) -> int:
        """마커의 모든 사진 행을 삭제하고 삭제 건수를 반환합니다."""
        ...
