"""S3 image store (boto3)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError, ClientError

from apps.cleanup.application.common.exceptions import ImageNotFoundError, ImageStorageError
from apps.cleanup.application.common.ports import ImageStore
from apps.cleanup.infrastructure.storage.local_store import build_image_key

if TYPE_CHECKING:
    from botocore.client import BaseClient

logger = logging.getLogger(__name__)

_MISSING_CODES = {"NoSuchKey", "404", "NotFound"}


class S3ImageStore(ImageStore):
    """S3 버킷에 이미지를 저장합니다. 참조 경로는 객체 키입니다."""

    def __init__(self, s3_client: BaseClient, bucket: str, prefix: str = "cleanup") -> None:
        self._s3 = s3_client
        self._bucket = bucket
        self._prefix = prefix

    def store(self, content: bytes, filename: str | None = None) -> str:
        key = build_image_key(filename, self._prefix)
        try:
            self._s3.put_object(Bucket=self._bucket, Key=key, Body=content)
        except (BotoCoreError, ClientError) as exc:
            raise ImageStorageError(f"Failed to upload image: {exc}") from exc
        logger.debug("Image uploaded", extra={"key": key, "size_bytes": len(content)})
        return key

    def fetch(self, image_ref: str) -> bytes:
        try:
            obj = self._s3.get_object(Bucket=self._bucket, Key=image_ref)
            return obj["Body"].read()
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in _MISSING_CODES:
                raise ImageNotFoundError(image_ref) from exc
            raise ImageStorageError(f"Failed to download image: {exc}") from exc
        except BotoCoreError as exc:
            # 연결 실패, 읽기 타임아웃 등
            raise ImageStorageError(f"Failed to download image: {exc}") from exc

    def delete(self, image_ref: str) -> bool:
        try:
            self._s3.delete_object(Bucket=self._bucket, Key=image_ref)
        except (BotoCoreError, ClientError) as exc:
            logger.warning(
                "Image delete failed",
                extra={"key": image_ref, "error": str(exc)},
            )
            return False
        return True
