"""Marker queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.cleanup.application.common.exceptions import MarkerNotFoundError

if TYPE_CHECKING:
    from apps.cleanup.application.marker.ports import MarkerQueryGateway
    from apps.cleanup.domain.entities import Marker


class GetMarkerQuery:
    """단일 마커 조회."""

    def __init__(self, marker_query: MarkerQueryGateway) -> None:
        self._marker_query = marker_query

    async def execute(self, marker_id: int) -> Marker:
        marker = await self._marker_query.get_by_id(marker_id)
        if marker is None or marker.is_removed():
            raise MarkerNotFoundError(marker_id)
        return marker


class ListMarkersQuery:
    """마커 목록 조회."""

    def __init__(self, marker_query: MarkerQueryGateway) -> None:
        self._marker_query = marker_query

    async def active(self, limit: int = 100, offset: int = 0) -> list[Marker]:
        return await self._marker_query.list_active(limit=limit, offset=offset)

    async def by_reporter(self, user_id: int) -> list[Marker]:
        return await self._marker_query.list_by_reporter(user_id)
