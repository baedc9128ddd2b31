"""Cleanup Worker Entry Point.

Usage:
    celery -A apps.cleanup.worker worker \\
        -Q cleanup.verify \\
        --loglevel=INFO
"""

from apps.cleanup.presentation import tasks  # noqa: F401  태스크 등록
from apps.cleanup.setup.celery import celery_app

# Celery app export for worker startup
app = celery_app

if __name__ == "__main__":
    celery_app.start()
