"""Marker controller - 마커 등록/조회/삭제, 사진 업로드, 검증 상태."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile, status

from apps.cleanup.application.marker.commands import (
    RegisterMarkerCommand,
    RemoveMarkerCommand,
    UploadPhotosCommand,
)
from apps.cleanup.application.marker.dto import UploadedFile
from apps.cleanup.application.marker.queries import GetMarkerQuery, ListMarkersQuery
from apps.cleanup.application.verification.commands import RetriggerVerificationCommand
from apps.cleanup.application.verification.queries import GetVerificationStatusQuery
from apps.cleanup.domain.enums import PhotoKind
from apps.cleanup.presentation.http.auth import get_current_user_id
from apps.cleanup.presentation.http.schemas import (
    MarkerCreateRequest,
    MarkerResponse,
    PhotoUploadResponse,
    VerificationRequestResponse,
    VerificationStatusResponse,
)
from apps.cleanup.setup.dependencies import (
    get_get_marker_query,
    get_list_markers_query,
    get_register_marker_command,
    get_remove_marker_command,
    get_retrigger_verification_command,
    get_upload_photos_command,
    get_verification_status_query,
)

router = APIRouter(prefix="/markers", tags=["markers"])


@router.post("", response_model=MarkerResponse, status_code=status.HTTP_201_CREATED)
async def register_marker(
    request: MarkerCreateRequest,
    user_id: int = Depends(get_current_user_id),
    command: RegisterMarkerCommand = Depends(get_register_marker_command),
) -> MarkerResponse:
    """쓰레기 위치를 제보합니다."""
    marker = await command.execute(
        reporter_id=user_id,
        lat=request.lat,
        lng=request.lng,
        description=request.description,
        address=request.address,
    )
    return MarkerResponse.model_validate(marker)


@router.get("", response_model=list[MarkerResponse])
async def list_active_markers(
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    query: ListMarkersQuery = Depends(get_list_markers_query),
) -> list[MarkerResponse]:
    """ACTIVE 마커 목록."""
    markers = await query.active(limit=limit, offset=offset)
    return [MarkerResponse.model_validate(m) for m in markers]


@router.get("/mine", response_model=list[MarkerResponse])
async def list_my_markers(
    user_id: int = Depends(get_current_user_id),
    query: ListMarkersQuery = Depends(get_list_markers_query),
) -> list[MarkerResponse]:
    """내가 제보한 마커 목록."""
    markers = await query.by_reporter(user_id)
    return [MarkerResponse.model_validate(m) for m in markers]


@router.get("/{marker_id}", response_model=MarkerResponse)
async def get_marker(
    marker_id: int,
    query: GetMarkerQuery = Depends(get_get_marker_query),
) -> MarkerResponse:
    marker = await query.execute(marker_id)
    return MarkerResponse.model_validate(marker)


@router.delete("/{marker_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_marker(
    marker_id: int,
    user_id: int = Depends(get_current_user_id),
    command: RemoveMarkerCommand = Depends(get_remove_marker_command),
) -> Response:
    """마커를 삭제합니다 (제보자만)."""
    await command.execute(marker_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{marker_id}/photos",
    response_model=PhotoUploadResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_photos(
    marker_id: int,
    kind: PhotoKind = Query(..., description="BEFORE 또는 AFTER"),
    files: list[UploadFile] = File(...),
    user_id: int = Depends(get_current_user_id),
    command: UploadPhotosCommand = Depends(get_upload_photos_command),
) -> PhotoUploadResponse:
    """청소 전/후 사진을 업로드합니다. AFTER 업로드는 검증을 요청합니다."""
    uploads = [
        UploadedFile(
            content=await f.read(),
            filename=f.filename,
            content_type=f.content_type,
        )
        for f in files
    ]
    result = await command.execute(marker_id, user_id, kind, uploads)
    return PhotoUploadResponse(
        marker_id=result.marker_id,
        kind=result.kind,
        photo_ids=result.photo_ids,
        verification_requested=result.verification_requested,
    )


@router.get("/{marker_id}/verification", response_model=VerificationStatusResponse)
async def get_verification_status(
    marker_id: int,
    query: GetVerificationStatusQuery = Depends(get_verification_status_query),
) -> VerificationStatusResponse:
    """마커의 청소 인증 상태."""
    result = await query.execute(marker_id)
    return VerificationStatusResponse.model_validate(result)


@router.post(
    "/{marker_id}/verification",
    response_model=VerificationRequestResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def retrigger_verification(
    marker_id: int,
    user_id: int = Depends(get_current_user_id),
    command: RetriggerVerificationCommand = Depends(get_retrigger_verification_command),
) -> VerificationRequestResponse:
    """PENDING으로 남은 AFTER 사진의 검증을 다시 요청합니다 (제보자/업로더만)."""
    result = await command.execute(marker_id, user_id)
    return VerificationRequestResponse.model_validate(result)
