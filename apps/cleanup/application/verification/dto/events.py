"""Verification event DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from apps.cleanup.domain.enums import PhotoKind


@dataclass(frozen=True)
class PhotoUploadedEvent:
    """사진 업로드 트랜잭션 커밋 이벤트."""

    marker_id: int
    uploader_id: int
    photo_kind: PhotoKind

    def to_dict(self) -> dict[str, Any]:
        return {
            "marker_id": self.marker_id,
            "uploader_id": self.uploader_id,
            "photo_kind": self.photo_kind.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PhotoUploadedEvent:
        return cls(
            marker_id=int(data["marker_id"]),
            uploader_id=int(data["uploader_id"]),
            photo_kind=PhotoKind(data["photo_kind"]),
        )
