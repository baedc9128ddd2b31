"""Celery App Configuration.

⚠️ 큐 생성은 브로커 토폴로지에 위임 (no_declare=True)
   Python에서는 task routing만 정의
"""

from __future__ import annotations

import logging
from typing import Any

from celery import Celery
from celery.signals import setup_logging, worker_ready, worker_shutdown
from kombu import Queue

from apps.cleanup.infrastructure.messaging import VERIFY_QUEUE, VERIFY_TASK_NAME
from apps.cleanup.setup.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

# 태스크 = 큐 1:1
CLEANUP_TASK_ROUTES = {
    VERIFY_TASK_NAME: {"queue": VERIFY_QUEUE},
}

CLEANUP_TASK_QUEUES = [
    Queue("celery", no_declare=True),
    Queue(VERIFY_QUEUE, no_declare=True),
]

celery_app = Celery("cleanup_worker", broker=settings.celery_broker_url)

celery_app.autodiscover_tasks(["apps.cleanup.presentation.tasks"])

celery_app.conf.update(
    task_routes=CLEANUP_TASK_ROUTES,
    task_queues=CLEANUP_TASK_QUEUES,
    task_default_queue="celery",
    task_default_exchange="",  # AMQP default exchange (direct routing)
    task_default_routing_key="celery",
    task_create_missing_queues=False,
    task_track_started=True,
    task_serializer="json",
    result_serializer="json",
    accept_content=["json"],
    timezone="Asia/Seoul",
    enable_utc=True,
    # at-least-once: 처리 완료 후 ack
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    worker_send_task_events=True,
    worker_prefetch_multiplier=1,
    worker_max_tasks_per_child=100,
)


@setup_logging.connect
def configure_worker_logging(**kwargs: Any) -> None:
    """Celery 기본 로깅 대신 ECS 로깅을 사용합니다.

    이 시그널에 수신자가 있으면 Celery는 루트 로거를 설정하지 않습니다.
    """
    from apps.cleanup.setup.logging import setup_logging as configure_logging

    configure_logging("cleanup-worker")


@worker_ready.connect
def init_worker_resources(sender: Any, **kwargs: Any) -> None:
    """Worker 시작 시 리소스 초기화."""
    from apps.cleanup.setup.tracing import (
        configure_tracing,
        instrument_celery,
        instrument_httpx,
    )

    if configure_tracing("cleanup-worker"):
        instrument_celery()
        instrument_httpx()
    logger.info("cleanup_worker_initialized")


@worker_shutdown.connect
def shutdown_worker_resources(sender: Any, **kwargs: Any) -> None:
    from apps.cleanup.setup.tracing import shutdown_tracing

    shutdown_tracing()
    logger.info("cleanup_worker_shutdown")
