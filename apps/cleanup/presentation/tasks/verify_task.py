"""Verify Marker Task - 청소 인증 Orchestrator 호스트.

Flow:
    1. API: AFTER 사진 업로드 커밋 → cleanup.verify_marker 발행
    2. cleanup worker: VerifyMarkerCommand 실행
    3. Judge에 도달하지 못하면 브로커 재전달(self.retry)로 재시도
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from celery import Task

from apps.cleanup.application.verification.dto import PhotoUploadedEvent, VerificationResult
from apps.cleanup.infrastructure.messaging import VERIFY_QUEUE, VERIFY_TASK_NAME
from apps.cleanup.infrastructure.persistence_postgres.mappings import start_mappers
from apps.cleanup.setup.celery import celery_app
from apps.cleanup.setup.config import get_settings
from apps.cleanup.setup.database import worker_session
from apps.cleanup.setup.dependencies import (
    build_verification_judge,
    build_verify_marker_command,
)

logger = logging.getLogger(__name__)


@celery_app.task(
    bind=True,
    name=VERIFY_TASK_NAME,
    queue=VERIFY_QUEUE,
    acks_late=True,
    soft_time_limit=120,
    time_limit=180,
)
def verify_marker_task(self: Task, event: dict[str, Any]) -> dict[str, Any]:
    """청소 인증 태스크.

    Args:
        event: PhotoUploadedEvent dict (marker_id, uploader_id, photo_kind)

    Returns:
        VerificationResult dict
    """
    settings = get_settings()
    log_ctx = {
        "marker_id": event.get("marker_id"),
        "user_id": event.get("uploader_id"),
        "celery_task_id": self.request.id,
        "attempt": self.request.retries,
    }
    logger.info("Verify task started", extra=log_ctx)

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        result = loop.run_until_complete(_verify(PhotoUploadedEvent.from_dict(event)))
    finally:
        loop.close()

    if result.retryable:
        max_redeliveries = settings.verification_max_redeliveries
        if self.request.retries >= max_redeliveries:
            logger.error(
                "Verification redelivery budget exhausted; manual re-trigger required",
                extra={**log_ctx, "max_redeliveries": max_redeliveries},
            )
            return result.to_dict()
        raise self.retry(
            countdown=settings.verification_redelivery_delay,
            max_retries=max_redeliveries,
        )

    logger.info("Verify task completed", extra={**log_ctx, **result.to_dict()})
    return result.to_dict()


async def _verify(event: PhotoUploadedEvent) -> VerificationResult:
    start_mappers()
    judge = build_verification_judge()
    try:
        async with worker_session() as session:
            command = build_verify_marker_command(session, judge)
            return await command.execute(event)
    finally:
        await judge.aclose()
