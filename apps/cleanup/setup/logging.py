"""Logging Configuration.

ECS 호환 JSON 로깅 설정입니다.
extra={...} 로 넘긴 marker_id, photo_id, user_id 등은 JSON 필드로 출력됩니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import ecs_logging

from apps.cleanup.setup.config import get_settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(service_name: str | None = None) -> None:
    """루트 로거를 stdout 핸들러 하나로 재설정합니다.

    Args:
        service_name: 로그의 service.name (None이면 설정값)
    """
    settings = get_settings()
    service = service_name or settings.service_name

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_format == "json":
        handler.setFormatter(ecs_logging.StdlibFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 서비스 메타데이터 추가
    old_factory = logging.getLogRecordFactory()

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = old_factory(*args, **kwargs)
        record.service = {"name": service, "environment": settings.environment}
        return record

    logging.setLogRecordFactory(record_factory)

    # 외부 라이브러리 로그 레벨 조정
    for name in ("sqlalchemy.engine", "sqlalchemy.pool", "httpx", "kombu"):
        logging.getLogger(name).setLevel(logging.WARNING)
