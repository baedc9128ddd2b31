"""Celery Tasks."""

from apps.cleanup.presentation.tasks.verify_task import verify_marker_task

__all__ = ["verify_marker_task"]
