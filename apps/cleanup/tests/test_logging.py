"""Logging 테스트."""

from __future__ import annotations

import json
import logging
import os
from unittest.mock import patch

from apps.cleanup.setup.config import get_settings
from apps.cleanup.setup.logging import setup_logging


class TestSetupLogging:
    """setup_logging 함수 테스트."""

    def setup_method(self) -> None:
        get_settings.cache_clear()
        self._root_handlers = logging.getLogger().handlers[:]
        self._root_level = logging.getLogger().level
        self._record_factory = logging.getLogRecordFactory()

    def teardown_method(self) -> None:
        # 로깅 상태 복원
        root_logger = logging.getLogger()
        root_logger.handlers[:] = self._root_handlers
        root_logger.setLevel(self._root_level)
        logging.setLogRecordFactory(self._record_factory)
        get_settings.cache_clear()

    def test_replaces_root_handlers(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}):
            setup_logging()

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1

    def test_json_output_keeps_entity_ids(self, capsys) -> None:
        """extra 로 넘긴 식별자가 출력에 남아야 수동 정산이 가능합니다."""
        with patch.dict(os.environ, {"LOG_FORMAT": "json", "ENVIRONMENT": "test"}):
            setup_logging("cleanup-worker")

        logging.getLogger("apps.cleanup.test").error(
            "Point award failed; manual reconciliation required",
            extra={"marker_id": 4242, "photo_id": 9, "beneficiary_id": 777},
        )

        line = capsys.readouterr().out.strip().splitlines()[-1]
        doc = json.loads(line)
        assert doc["message"] == "Point award failed; manual reconciliation required"
        assert doc["marker_id"] == 4242
        assert doc["photo_id"] == 9
        assert doc["beneficiary_id"] == 777
        assert doc["service"]["name"] == "cleanup-worker"
        assert doc["service"]["environment"] == "test"

    def test_text_format(self, capsys) -> None:
        with patch.dict(os.environ, {"LOG_FORMAT": "text"}):
            setup_logging()

        logging.getLogger("apps.cleanup.test").warning("Judge unavailable")

        out = capsys.readouterr().out
        assert " - apps.cleanup.test - WARNING - Judge unavailable" in out

    def test_silences_external_libraries(self) -> None:
        setup_logging()

        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING
