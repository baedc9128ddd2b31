"""Celery Verification Event Publisher.

cleanup.verify 큐로 업로드 커밋 이벤트를 발행합니다.
cleanup worker가 이벤트를 수신하여 청소 인증을 수행합니다.
"""

from __future__ import annotations

import logging

from celery import Celery

from apps.cleanup.application.verification.dto import PhotoUploadedEvent

logger = logging.getLogger(__name__)

VERIFY_TASK_NAME = "cleanup.verify_marker"
VERIFY_QUEUE = "cleanup.verify"
TRACEPARENT_HEADER = "traceparent"


def _get_trace_headers() -> dict[str, str]:
    """현재 trace context를 Celery headers로 추출."""
    from opentelemetry import trace
    from opentelemetry.trace import format_span_id, format_trace_id

    span_context = trace.get_current_span().get_span_context()
    if not span_context.is_valid:
        return {}
    trace_id = format_trace_id(span_context.trace_id)
    span_id = format_span_id(span_context.span_id)
    return {TRACEPARENT_HEADER: f"00-{trace_id}-{span_id}-{span_context.trace_flags:02x}"}


class CeleryVerificationEventPublisher:
    """Celery 기반 검증 이벤트 발행자."""

    def __init__(self, celery_app: Celery, propagate_trace: bool = False) -> None:
        self._celery_app = celery_app
        self._propagate_trace = propagate_trace

    def publish(self, event: PhotoUploadedEvent) -> None:
        """검증 이벤트를 발행합니다.

        ⚠️ default exchange("") 사용: cleanup.verify 큐로 직접 라우팅
        """
        log_ctx = {"marker_id": event.marker_id, "user_id": event.uploader_id}
        try:
            headers = _get_trace_headers() if self._propagate_trace else {}
            self._celery_app.send_task(
                VERIFY_TASK_NAME,
                kwargs={"event": event.to_dict()},
                exchange="",
                routing_key=VERIFY_QUEUE,
                headers=headers,
            )
            logger.info("Verification event published", extra=log_ctx)
        except Exception:
            # 사진은 이미 커밋됨. 검증은 다음 AFTER 업로드 또는 수동 재실행으로 복구
            logger.exception("Failed to publish verification event", extra=log_ctx)
