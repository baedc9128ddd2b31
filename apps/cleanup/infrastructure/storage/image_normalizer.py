"""Image normalizer - Judge 전송용 이미지 축소/재인코딩 (Pillow)."""

from __future__ import annotations

import base64
import io

from PIL import Image, ImageOps, UnidentifiedImageError

DEFAULT_MAX_SIDE = 1024
DEFAULT_JPEG_QUALITY = 85


class InvalidImageError(ValueError):
    """이미지로 해석할 수 없는 바이트."""


class ImageNormalizer:
    """긴 변을 max_side 이하로 줄이고 JPEG로 재인코딩합니다."""

    def __init__(self, max_side: int = DEFAULT_MAX_SIDE, quality: int = DEFAULT_JPEG_QUALITY) -> None:
        self._max_side = max_side
        self._quality = quality

    def normalize(self, content: bytes) -> bytes:
        try:
            with Image.open(io.BytesIO(content)) as img:
                img = ImageOps.exif_transpose(img)
                img = img.convert("RGB")
                img.thumbnail((self._max_side, self._max_side))
                buf = io.BytesIO()
                img.save(buf, format="JPEG", quality=self._quality)
        except (UnidentifiedImageError, OSError) as exc:
            raise InvalidImageError(str(exc)) from exc
        return buf.getvalue()

    def to_data_url(self, content: bytes) -> str:
        b64 = base64.b64encode(self.normalize(content)).decode("utf-8")
        return f"data:image/jpeg;base64,{b64}"
