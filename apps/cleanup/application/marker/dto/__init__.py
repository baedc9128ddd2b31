"""Marker DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field

from apps.cleanup.domain.enums import PhotoKind


@dataclass(frozen=True)
class UploadedFile:
    """업로드된 파일."""

    content: bytes
    filename: str | None = None
    content_type: str | None = None


@dataclass
class PhotoUploadResult:
    """사진 업로드 결과."""

    marker_id: int
    kind: PhotoKind
    photo_ids: list[int] = field(default_factory=list)
    image_refs: list[str] = field(default_factory=list)
    verification_requested: bool = False


__all__ = ["PhotoUploadResult", "UploadedFile"]
