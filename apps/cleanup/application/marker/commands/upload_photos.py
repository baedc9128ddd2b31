"""Upload photos command - 청소 전/후 사진 업로드."""

from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import TYPE_CHECKING

from apps.cleanup.application.common.exceptions import (
    InvalidRequestError,
    MarkerNotFoundError,
)
from apps.cleanup.application.marker.dto import PhotoUploadResult, UploadedFile
from apps.cleanup.application.verification.dto import PhotoUploadedEvent
from apps.cleanup.domain.entities import Photo
from apps.cleanup.domain.enums import PhotoKind
from apps.cleanup.domain.exceptions import InvalidMarkerTransitionError

if TYPE_CHECKING:
    from apps.cleanup.application.common.ports import ImageStore, TransactionManager
    from apps.cleanup.application.marker.ports import (
        MarkerQueryGateway,
        PhotoCommandGateway,
    )
    from apps.cleanup.application.verification.ports import VerificationEventPublisher

logger = logging.getLogger(__name__)


class UploadPhotosCommand:
    """사진 업로드 유스케이스.

    Flow:
        1. 이미지 저장소에 파일 저장
        2. PENDING 상태 Photo 행 생성
        3. 커밋
        4. (AFTER 업로드만) 커밋 이후 검증 이벤트 1건 발행

    이벤트는 커밋 이후에만 발행하므로 Orchestrator는 항상 새 사진을 읽을 수 있습니다.
    """

    def __init__(
        self,
        marker_query: MarkerQueryGateway,
        photo_command: PhotoCommandGateway,
        image_store: ImageStore,
        event_publisher: VerificationEventPublisher,
        transaction_manager: TransactionManager,
    ) -> None:
        self._marker_query = marker_query
        self._photo_command = photo_command
        self._image_store = image_store
        self._publisher = event_publisher
        self._tx = transaction_manager

    async def execute(
        self,
        marker_id: int,
        uploader_id: int,
        kind: PhotoKind,
        files: list[UploadedFile],
    ) -> PhotoUploadResult:
        """사진을 업로드합니다.

        Raises:
            InvalidRequestError: 빈 파일 목록
            MarkerNotFoundError: 마커 없음
            InvalidMarkerTransitionError: 삭제된 마커
        """
        files = [f for f in files if f.content]
        if not files:
            raise InvalidRequestError("At least one non-empty file is required")

        marker = await self._marker_query.get_by_id(marker_id)
        if marker is None:
            raise MarkerNotFoundError(marker_id)
        if marker.is_removed():
            raise InvalidMarkerTransitionError(marker_id, marker.status.value, "UPLOAD")

        # 저장소 호출은 blocking I/O (boto3, 파일) 이므로 이벤트 루프 밖에서 실행
        loop = asyncio.get_running_loop()
        image_refs: list[str] = []
        try:
            for upload in files:
                ref = await loop.run_in_executor(
                    None, partial(self._image_store.store, upload.content, upload.filename)
                )
                image_refs.append(ref)

            photos = [
                Photo(
                    marker_id=marker_id,
                    uploaded_by=uploader_id,
                    image_ref=ref,
                    kind=kind,
                )
                for ref in image_refs
            ]
            photos = await self._photo_command.add_all(photos)
            await self._tx.commit()
        except Exception:
            await self._tx.rollback()
            await loop.run_in_executor(None, self._discard_images, image_refs)
            raise

        result = PhotoUploadResult(
            marker_id=marker_id,
            kind=kind,
            photo_ids=[p.id for p in photos if p.id is not None],
            image_refs=image_refs,
        )
        logger.info(
            "Photos uploaded",
            extra={
                "marker_id": marker_id,
                "user_id": uploader_id,
                "kind": kind.value,
                "count": len(photos),
            },
        )

        if kind == PhotoKind.AFTER:
            self._publisher.publish(
                PhotoUploadedEvent(
                    marker_id=marker_id,
                    uploader_id=uploader_id,
                    photo_kind=kind,
                )
            )
            result.verification_requested = True

        return result

    def _discard_images(self, image_refs: list[str]) -> None:
        for ref in image_refs:
            if not self._image_store.delete(ref):
                logger.warning("Orphan image left in store", extra={"image_ref": ref})
