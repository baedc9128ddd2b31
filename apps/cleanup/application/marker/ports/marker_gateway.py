"""Marker gateway ports (interfaces)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.cleanup.domain.entities import Marker


class MarkerQueryGateway(Protocol):
    """마커 조회 포트."""

    async def get_by_id(self, marker_id: int) -> Marker | None:
        ...

    async def list_active(self, limit: int = 100, offset: int = 0) -> list[Marker]:
        """ACTIVE 마커를 최신순으로 조회합니다."""
        ...

    async def list_by_reporter(self, user_id: int) -> list[Marker]:
        """제보자의 마커를 최신순으로 조회합니다 (REMOVED 제외)."""
        ...


class MarkerCommandGateway(Protocol):
    """마커 수정 포트."""

    async def add(self, marker: Marker) -> Marker:
        """새 마커를 저장하고 ID를 부여합니다."""
        ...

    async def get_for_update(self, marker_id: int) -> Marker | None:
        """행 잠금(SELECT ... FOR UPDATE)과 함께 조회합니다."""
        ...
