"""Remove marker command - 제보자의 마커 삭제."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from apps.cleanup.application.common.exceptions import (
    MarkerNotFoundError,
    NotMarkerReporterError,
)

if TYPE_CHECKING:
    from apps.cleanup.application.common.ports import ImageStore, TransactionManager
    from apps.cleanup.application.marker.ports import (
        MarkerCommandGateway,
        PhotoCommandGateway,
        PhotoQueryGateway,
    )

logger = logging.getLogger(__name__)


class RemoveMarkerCommand:
    """마커 삭제 유스케이스.

    마커는 REMOVED 상태로 남기고(감사용), 사진 행은 삭제합니다.
    저장된 이미지 삭제는 best-effort이며 실패해도 삭제 자체는 성공합니다.
    """

    def __init__(
        self,
        marker_command: MarkerCommandGateway,
        photo_query: PhotoQueryGateway,
        photo_command: PhotoCommandGateway,
        image_store: ImageStore,
        transaction_manager: TransactionManager,
    ) -> None:
        self._marker_command = marker_command
        self._photo_query = photo_query
        self._photo_command = photo_command
        self._image_store = image_store
        self._tx = transaction_manager

    async def execute(self, marker_id: int, user_id: int) -> int:
        """마커를 삭제하고 삭제된 사진 수를 반환합니다.

        Raises:
            MarkerNotFoundError: 마커 없음
            NotMarkerReporterError: 제보자가 아님
            InvalidMarkerTransitionError: 이미 삭제된 마커
        """
        marker = await self._marker_command.get_for_update(marker_id)
        if marker is None:
            raise MarkerNotFoundError(marker_id)
        if not marker.is_reported_by(user_id):
            raise NotMarkerReporterError(marker_id, user_id)

        marker.mark_removed()
        photos = await self._photo_query.list_by_marker(marker_id)
        image_refs = [p.image_ref for p in photos]
        deleted = await self._photo_command.delete_by_marker(marker_id)
        await self._tx.commit()

        logger.info(
            "Marker removed",
            extra={"marker_id": marker_id, "user_id": user_id, "photos": deleted},
        )

        loop = asyncio.get_running_loop()
        for ref in image_refs:
            try:
                removed = await loop.run_in_executor(None, self._image_store.delete, ref)
            except Exception:
                logger.exception(
                    "Image delete failed",
                    extra={"marker_id": marker_id, "image_ref": ref},
                )
                continue
            if not removed:
                logger.warning(
                    "Image delete failed",
                    extra={"marker_id": marker_id, "image_ref": ref},
                )

        return deleted
