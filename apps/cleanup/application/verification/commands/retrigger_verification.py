"""Retrigger verification command - 수동 재검증 요청.

재전달 한도를 넘겼거나 Judge가 요청을 거부해 PENDING으로 남은 AFTER 사진을
다시 검증 큐에 올립니다. 실제 판정은 worker가 수행하며 PENDING 가드가
중복 요청을 한 번의 상태 변경으로 수렴시킵니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.cleanup.application.common.exceptions import (
    InvalidRequestError,
    MarkerNotFoundError,
    NotMarkerParticipantError,
)
from apps.cleanup.application.verification.dto import PhotoUploadedEvent, VerificationRequestDTO
from apps.cleanup.domain.enums import PhotoKind
from apps.cleanup.domain.exceptions import InvalidMarkerTransitionError

if TYPE_CHECKING:
    from apps.cleanup.application.marker.ports import MarkerQueryGateway, PhotoQueryGateway
    from apps.cleanup.application.verification.ports import VerificationEventPublisher

logger = logging.getLogger(__name__)


class RetriggerVerificationCommand:
    """수동 재검증 유스케이스 (제보자 또는 사진 업로더만)."""

    def __init__(
        self,
        marker_query: MarkerQueryGateway,
        photo_query: PhotoQueryGateway,
        event_publisher: VerificationEventPublisher,
    ) -> None:
        self._marker_query = marker_query
        self._photo_query = photo_query
        self._publisher = event_publisher

    async def execute(self, marker_id: int, user_id: int) -> VerificationRequestDTO:
        """대표 AFTER 사진이 PENDING이면 검증 이벤트를 다시 발행합니다.

        Raises:
            MarkerNotFoundError: 마커 없음
            InvalidMarkerTransitionError: 삭제된 마커
            NotMarkerParticipantError: 제보자도 업로더도 아님
            InvalidRequestError: 검증할 AFTER 사진 없음
        """
        marker = await self._marker_query.get_by_id(marker_id)
        if marker is None:
            raise MarkerNotFoundError(marker_id)
        if marker.is_removed():
            raise InvalidMarkerTransitionError(marker_id, marker.status.value, "VERIFY")

        photos = await self._photo_query.list_by_marker(marker_id)
        if not marker.is_reported_by(user_id) and all(p.uploaded_by != user_id for p in photos):
            raise NotMarkerParticipantError(marker_id, user_id)

        afters = [p for p in photos if p.kind == PhotoKind.AFTER]
        if not afters:
            raise InvalidRequestError("No AFTER photo to verify")

        representative = afters[0]
        log_ctx = {"marker_id": marker_id, "user_id": user_id, "photo_id": representative.id}
        if not representative.is_pending():
            logger.info("Verification already settled; re-trigger skipped", extra=log_ctx)
            return VerificationRequestDTO(
                marker_id=marker_id,
                photo_id=representative.id,
                verification_status=representative.verification_status.value,
                verification_requested=False,
            )

        self._publisher.publish(
            PhotoUploadedEvent(
                marker_id=marker_id,
                uploader_id=user_id,
                photo_kind=PhotoKind.AFTER,
            )
        )
        logger.info("Manual verification re-trigger published", extra=log_ctx)
        return VerificationRequestDTO(
            marker_id=marker_id,
            photo_id=representative.id,
            verification_status=representative.verification_status.value,
            verification_requested=True,
        )
