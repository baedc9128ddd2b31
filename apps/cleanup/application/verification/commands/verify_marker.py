"""Verify marker command - 청소 인증 Orchestrator.

업로드 커밋 이벤트마다 한 번 실행됩니다 (at-least-once).
중복/동시 실행은 Photo의 PENDING 가드로 한 번의 상태 변경으로 수렴합니다.

Flow:
    1. 마커의 첫 BEFORE / 첫 AFTER 사진 선택 (없으면 정상 종료)
    2. Judge 호출 (DB 트랜잭션 밖). 연결/저장소 장애는 재전달, 요청 거부는 종료
    3. 한 트랜잭션 안에서 AFTER 사진 잠금 → PENDING 확인 → 판정 적용
    4. 승인 시 마커 CLEANED + 업로더에게 포인트 적립 (SAVEPOINT)
    5. 적립 실패는 로그만 남기고 판정은 유지
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from apps.cleanup.application.common.exceptions import ImageNotFoundError, ImageStorageError
from apps.cleanup.application.verification.dto import (
    PhotoUploadedEvent,
    VerificationOutcome,
    VerificationResult,
)
from apps.cleanup.application.verification.exceptions import (
    JudgeRequestError,
    JudgeUnavailableError,
)
from apps.cleanup.domain.clock import utcnow
from apps.cleanup.domain.enums import PhotoKind
from apps.cleanup.domain.exceptions import VerificationGuardSkip

if TYPE_CHECKING:
    from apps.cleanup.application.common.ports import TransactionManager
    from apps.cleanup.application.marker.ports import (
        MarkerCommandGateway,
        MarkerQueryGateway,
        PhotoCommandGateway,
        PhotoQueryGateway,
    )
    from apps.cleanup.application.point.services import PointLedger
    from apps.cleanup.application.verification.ports import VerificationJudge
    from apps.cleanup.domain.value_objects import Verdict

logger = logging.getLogger(__name__)


class VerifyMarkerCommand:
    """청소 인증 유스케이스."""

    def __init__(
        self,
        marker_query: MarkerQueryGateway,
        marker_command: MarkerCommandGateway,
        photo_query: PhotoQueryGateway,
        photo_command: PhotoCommandGateway,
        judge: VerificationJudge,
        ledger: PointLedger,
        transaction_manager: TransactionManager,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._marker_query = marker_query
        self._marker_command = marker_command
        self._photo_query = photo_query
        self._photo_command = photo_command
        self._judge = judge
        self._ledger = ledger
        self._tx = transaction_manager
        self._clock = clock

    async def execute(self, event: PhotoUploadedEvent) -> VerificationResult:
        marker_id = event.marker_id
        log_ctx = {"marker_id": marker_id, "user_id": event.uploader_id}

        if event.photo_kind != PhotoKind.AFTER:
            return VerificationResult(VerificationOutcome.NOT_AFTER_UPLOAD, marker_id)

        befores = await self._photo_query.list_by_marker(marker_id, PhotoKind.BEFORE)
        afters = await self._photo_query.list_by_marker(marker_id, PhotoKind.AFTER)
        if not befores or not afters:
            logger.info(
                "Nothing to verify yet",
                extra={**log_ctx, "before": len(befores), "after": len(afters)},
            )
            return VerificationResult(VerificationOutcome.NOTHING_TO_VERIFY, marker_id)

        before, after = befores[0], afters[0]
        log_ctx["photo_id"] = after.id

        if not after.is_pending():
            logger.debug("Photo already verified", extra=log_ctx)
            return VerificationResult(
                VerificationOutcome.ALREADY_VERIFIED,
                marker_id,
                photo_id=after.id,
                verdict=after.verification_status.value,
            )

        marker = await self._marker_query.get_by_id(marker_id)
        if marker is None or marker.is_removed():
            logger.warning("Marker unavailable for verification", extra=log_ctx)
            return VerificationResult(
                VerificationOutcome.MARKER_UNAVAILABLE, marker_id, photo_id=after.id
            )

        photo_id = after.id
        before_ref, after_ref = before.image_ref, after.image_ref
        location_hint = marker.location_hint
        # 읽기 트랜잭션 종료 (Judge 호출 동안 커넥션을 잡지 않음)
        await self._tx.rollback()

        try:
            verdict = await self._judge.judge(before_ref, after_ref, location_hint)
        except JudgeUnavailableError as exc:
            logger.warning(
                "Judge unavailable; awaiting redelivery",
                extra={**log_ctx, "error": exc.reason},
            )
            return VerificationResult(
                VerificationOutcome.JUDGE_UNAVAILABLE, marker_id, photo_id=photo_id
            )
        except JudgeRequestError as exc:
            logger.error(
                "Judge rejected the request; photo left PENDING for manual re-trigger",
                extra={**log_ctx, "status_code": exc.status_code, "error": exc.reason},
            )
            return VerificationResult(
                VerificationOutcome.JUDGE_REQUEST_FAILED, marker_id, photo_id=photo_id
            )
        except ImageNotFoundError as exc:
            logger.error(
                "Photo image missing from store",
                extra={**log_ctx, "image_ref": exc.image_ref},
            )
            return VerificationResult(
                VerificationOutcome.IMAGE_MISSING, marker_id, photo_id=photo_id
            )
        except ImageStorageError as exc:
            logger.warning(
                "Image store unavailable; awaiting redelivery",
                extra={**log_ctx, "error": exc.message},
            )
            return VerificationResult(
                VerificationOutcome.STORAGE_UNAVAILABLE, marker_id, photo_id=photo_id
            )

        return await self._apply(marker_id, photo_id, verdict, log_ctx)

    async def _apply(
        self, marker_id: int, photo_id: int, verdict: Verdict, log_ctx: dict
    ) -> VerificationResult:
        photo = await self._photo_command.get_for_update(photo_id)
        if photo is None:
            await self._tx.rollback()
            logger.warning("Photo deleted before verdict was applied", extra=log_ctx)
            return VerificationResult(
                VerificationOutcome.MARKER_UNAVAILABLE, marker_id, photo_id=photo_id
            )

        try:
            photo.apply_verdict(verdict, self._clock())
        except VerificationGuardSkip as skip:
            await self._tx.rollback()
            logger.debug("Verification guard skip", extra={**log_ctx, "status": skip.status})
            return VerificationResult(
                VerificationOutcome.ALREADY_VERIFIED,
                marker_id,
                photo_id=photo.id,
                verdict=skip.status,
            )

        result = VerificationResult(
            VerificationOutcome.VERIFIED,
            marker_id,
            photo_id=photo.id,
            verdict=photo.verification_status.value,
            confidence=verdict.confidence,
        )

        if verdict.approved:
            marker = await self._marker_command.get_for_update(marker_id)
            if marker is not None and not marker.is_removed():
                result.marker_cleaned = marker.mark_cleaned()

            try:
                async with self._tx.savepoint():
                    entry = await self._ledger.credit(
                        photo.uploaded_by,
                        confidence=verdict.confidence,
                        related_photo_id=photo.id,
                    )
                result.points_awarded = entry.delta
            except Exception:
                result.award_failed = True
                logger.exception(
                    "Point award failed; manual reconciliation required",
                    extra={**log_ctx, "beneficiary_id": photo.uploaded_by},
                )

        await self._tx.commit()

        logger.info(
            "Photo verified",
            extra={
                **log_ctx,
                "verdict": result.verdict,
                "confidence": verdict.confidence,
                "marker_cleaned": result.marker_cleaned,
                "points": result.points_awarded,
            },
        )
        return result
