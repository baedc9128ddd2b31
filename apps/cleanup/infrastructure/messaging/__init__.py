"""Messaging adapters."""

from apps.cleanup.infrastructure.messaging.verification_publisher_celery import (
    VERIFY_QUEUE,
    VERIFY_TASK_NAME,
    CeleryVerificationEventPublisher,
)

__all__ = ["VERIFY_QUEUE", "VERIFY_TASK_NAME", "CeleryVerificationEventPublisher"]
