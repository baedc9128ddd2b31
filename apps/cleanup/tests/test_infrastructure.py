"""Infrastructure 어댑터 단위 테스트 (저장소, 메시징, 프롬프트)."""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError, ReadTimeoutError

from apps.cleanup.application.common.exceptions import ImageNotFoundError, ImageStorageError
from apps.cleanup.application.verification.dto import PhotoUploadedEvent
from apps.cleanup.domain.enums import PhotoKind
from apps.cleanup.infrastructure.asset_loader import load_prompt
from apps.cleanup.infrastructure.messaging import (
    VERIFY_QUEUE,
    VERIFY_TASK_NAME,
    CeleryVerificationEventPublisher,
)
from apps.cleanup.infrastructure.storage import LocalImageStore, S3ImageStore
from apps.cleanup.infrastructure.storage.local_store import build_image_key


def _client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


class TestLocalImageStore:
    def test_store_fetch_delete(self, tmp_path: Path) -> None:
        store = LocalImageStore(tmp_path)

        ref = store.store(b"image-bytes", "photo.PNG")

        assert ref.endswith(".png")
        assert store.fetch(ref) == b"image-bytes"
        assert store.delete(ref) is True
        with pytest.raises(ImageNotFoundError):
            store.fetch(ref)
        assert store.delete(ref) is False

    def test_rejects_path_traversal(self, tmp_path: Path) -> None:
        store = LocalImageStore(tmp_path / "images")
        (tmp_path / "secret.txt").write_bytes(b"secret")

        with pytest.raises(ImageNotFoundError):
            store.fetch("../secret.txt")

    def test_unknown_extension_defaults_to_jpg(self) -> None:
        assert build_image_key("malware.exe").endswith(".jpg")
        assert build_image_key(None, prefix="/cleanup/").startswith("cleanup/")


class TestS3ImageStore:
    def test_store_uses_prefixed_key(self) -> None:
        s3 = MagicMock()
        store = S3ImageStore(s3, "bucket", prefix="cleanup")

        key = store.store(b"bytes", "a.jpg")

        assert key.startswith("cleanup/")
        s3.put_object.assert_called_once_with(Bucket="bucket", Key=key, Body=b"bytes")

    def test_fetch(self) -> None:
        s3 = MagicMock()
        s3.get_object.return_value = {"Body": io.BytesIO(b"bytes")}

        assert S3ImageStore(s3, "bucket").fetch("cleanup/a.jpg") == b"bytes"

    def test_missing_key(self) -> None:
        s3 = MagicMock()
        s3.get_object.side_effect = _client_error("NoSuchKey", "GetObject")

        with pytest.raises(ImageNotFoundError):
            S3ImageStore(s3, "bucket").fetch("cleanup/missing.jpg")

    def test_other_errors_are_storage_errors(self) -> None:
        s3 = MagicMock()
        s3.get_object.side_effect = _client_error("AccessDenied", "GetObject")
        s3.put_object.side_effect = _client_error("AccessDenied", "PutObject")
        store = S3ImageStore(s3, "bucket")

        with pytest.raises(ImageStorageError):
            store.fetch("cleanup/a.jpg")
        with pytest.raises(ImageStorageError):
            store.store(b"bytes")

    def test_connection_failure_is_storage_error(self) -> None:
        s3 = MagicMock()
        s3.get_object.side_effect = EndpointConnectionError(endpoint_url="https://s3.example")

        with pytest.raises(ImageStorageError):
            S3ImageStore(s3, "bucket").fetch("cleanup/a.jpg")

    def test_body_read_failure_is_storage_error(self) -> None:
        body = MagicMock()
        body.read.side_effect = ReadTimeoutError(endpoint_url="https://s3.example")
        s3 = MagicMock()
        s3.get_object.return_value = {"Body": body}

        with pytest.raises(ImageStorageError):
            S3ImageStore(s3, "bucket").fetch("cleanup/a.jpg")

    def test_delete_failure_returns_false(self) -> None:
        s3 = MagicMock()
        s3.delete_object.side_effect = _client_error("AccessDenied", "DeleteObject")

        assert S3ImageStore(s3, "bucket").delete("cleanup/a.jpg") is False


class TestCeleryVerificationEventPublisher:
    def test_publish_to_default_exchange(self) -> None:
        celery_app = MagicMock()
        event = PhotoUploadedEvent(3, 2, PhotoKind.AFTER)

        CeleryVerificationEventPublisher(celery_app).publish(event)

        celery_app.send_task.assert_called_once_with(
            VERIFY_TASK_NAME,
            kwargs={"event": {"marker_id": 3, "uploader_id": 2, "photo_kind": "AFTER"}},
            exchange="",
            routing_key=VERIFY_QUEUE,
            headers={},
        )

    def test_publish_failure_is_logged(self, caplog) -> None:
        celery_app = MagicMock()
        celery_app.send_task.side_effect = ConnectionError("broker down")

        CeleryVerificationEventPublisher(celery_app).publish(
            PhotoUploadedEvent(3, 2, PhotoKind.AFTER)
        )

        assert "Failed to publish verification event" in caplog.text

    def test_event_round_trip(self) -> None:
        event = PhotoUploadedEvent(3, 2, PhotoKind.AFTER)
        assert PhotoUploadedEvent.from_dict(event.to_dict()) == event


def test_verification_prompt_has_location_placeholder() -> None:
    prompt = load_prompt("cleanup_verification")
    assert "{location}" in prompt
    assert "confidence" in prompt
