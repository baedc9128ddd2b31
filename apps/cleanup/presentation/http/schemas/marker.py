"""Marker / Photo / Verification schemas."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from apps.cleanup.domain.enums import MarkerStatus, PhotoKind


class MarkerCreateRequest(BaseModel):
    """마커 등록 요청."""

    lat: Decimal = Field(..., description="위도")
    lng: Decimal = Field(..., description="경도")
    description: str | None = Field(None, max_length=500, description="위치 설명")
    address: str | None = Field(None, max_length=500)


class MarkerResponse(BaseModel):
    """마커 응답."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    reported_by: int
    lat: Decimal
    lng: Decimal
    description: str | None = None
    address: str | None = None
    status: MarkerStatus
    created_at: datetime
    updated_at: datetime


class PhotoUploadResponse(BaseModel):
    """사진 업로드 응답."""

    marker_id: int
    kind: PhotoKind
    photo_ids: list[int]
    verification_requested: bool


class VerificationStatusResponse(BaseModel):
    """마커 검증 상태 응답."""

    model_config = ConfigDict(from_attributes=True)

    marker_id: int
    marker_status: str
    photo_counts: dict[str, int]
    photo_id: int | None = None
    verification_status: str | None = None
    confidence: float | None = None
    rationale: str | None = None
    verified_at: datetime | None = None


class VerificationRequestResponse(BaseModel):
    """수동 재검증 요청 응답."""

    model_config = ConfigDict(from_attributes=True)

    marker_id: int
    photo_id: int
    verification_status: str
    verification_requested: bool
