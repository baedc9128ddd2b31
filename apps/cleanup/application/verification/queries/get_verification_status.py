"""Verification status query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.cleanup.application.common.exceptions import MarkerNotFoundError
from apps.cleanup.application.verification.dto import VerificationStatusDTO
from apps.cleanup.domain.enums import PhotoKind

if TYPE_CHECKING:
    from apps.cleanup.application.marker.ports import MarkerQueryGateway, PhotoQueryGateway


class GetVerificationStatusQuery:
    """마커의 검증 상태 조회.

    대표 AFTER 사진(가장 먼저 업로드된 것)의 상태를 반환합니다.
    """

    def __init__(
        self,
        marker_query: MarkerQueryGateway,
        photo_query: PhotoQueryGateway,
    ) -> None:
        self._marker_query = marker_query
        self._photo_query = photo_query

    async def execute(self, marker_id: int) -> VerificationStatusDTO:
        marker = await self._marker_query.get_by_id(marker_id)
        if marker is None:
            raise MarkerNotFoundError(marker_id)

        counts = await self._photo_query.count_by_kind(marker_id)
        status = VerificationStatusDTO(
            marker_id=marker_id,
            marker_status=marker.status.value,
            photo_counts={kind.value: counts.get(kind, 0) for kind in PhotoKind},
        )

        afters = await self._photo_query.list_by_marker(marker_id, PhotoKind.AFTER)
        if afters:
            photo = afters[0]
            status.photo_id = photo.id
            status.verification_status = photo.verification_status.value
            status.confidence = photo.confidence
            status.rationale = photo.rationale
            status.verified_at = photo.verified_at
        return status
