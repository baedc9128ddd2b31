"""Local filesystem image store."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from uuid import uuid4

from apps.cleanup.application.common.exceptions import ImageNotFoundError, ImageStorageError
from apps.cleanup.application.common.ports import ImageStore

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp", ".heic"}
DEFAULT_EXTENSION = ".jpg"


def build_image_key(filename: str | None, prefix: str = "") -> str:
    """{prefix}/{uuid}{ext} 형식의 저장 키를 만듭니다."""
    ext = PurePosixPath(filename or "").suffix.lower()
    if ext not in ALLOWED_EXTENSIONS:
        ext = DEFAULT_EXTENSION
    key = f"{uuid4().hex}{ext}"
    prefix = prefix.strip("/")
    return f"{prefix}/{key}" if prefix else key


class LocalImageStore(ImageStore):
    """로컬 디렉터리에 이미지를 저장합니다. 참조 경로는 루트 기준 상대 경로입니다."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).resolve()
        self._root.mkdir(parents=True, exist_ok=True)

    def _path(self, image_ref: str) -> Path:
        path = (self._root / image_ref).resolve()
        if self._root not in path.parents:
            raise ImageNotFoundError(image_ref)
        return path

    def store(self, content: bytes, filename: str | None = None) -> str:
        image_ref = build_image_key(filename)
        try:
            self._path(image_ref).write_bytes(content)
        except OSError as exc:
            raise ImageStorageError(f"Failed to store image: {exc}") from exc
        logger.debug("Image stored", extra={"image_ref": image_ref, "size_bytes": len(content)})
        return image_ref

    def fetch(self, image_ref: str) -> bytes:
        path = self._path(image_ref)
        if not path.is_file():
            raise ImageNotFoundError(image_ref)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise ImageStorageError(f"Failed to read image: {exc}") from exc

    def delete(self, image_ref: str) -> bool:
        try:
            self._path(image_ref).unlink()
        except (OSError, ImageNotFoundError) as exc:
            logger.warning(
                "Image delete failed",
                extra={"image_ref": image_ref, "error": str(exc)},
            )
            return False
        return True
