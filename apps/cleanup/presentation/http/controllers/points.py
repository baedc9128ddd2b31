"""Point controller - 포인트 원장 조회 (읽기 전용)."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query

from apps.cleanup.application.point.queries import GetPointHistoryQuery, GetPointStatisticsQuery
from apps.cleanup.domain.enums import PointType
from apps.cleanup.presentation.http.auth import get_current_user_id
from apps.cleanup.presentation.http.schemas import (
    MonthlyEarnedResponse,
    PointHistoryResponse,
    PointStatisticsResponse,
    ReconciliationResponse,
)
from apps.cleanup.setup.dependencies import (
    get_point_history_query,
    get_point_statistics_query,
)

router = APIRouter(prefix="/points", tags=["points"])


@router.get("/history", response_model=list[PointHistoryResponse])
async def get_history(
    type: PointType | None = Query(None, description="EARNED 또는 USED"),
    start: datetime | None = Query(None),
    end: datetime | None = Query(None),
    user_id: int = Depends(get_current_user_id),
    query: GetPointHistoryQuery = Depends(get_point_history_query),
) -> list[PointHistoryResponse]:
    """포인트 내역 (최신순). type 또는 [start, end) 구간으로 필터링합니다."""
    if start is not None and end is not None:
        entries = await query.between(user_id, start, end)
        if type is not None:
            entries = [e for e in entries if e.type == type]
    elif type is not None:
        entries = await query.by_type(user_id, type)
    else:
        entries = await query.all(user_id)
    return [PointHistoryResponse.model_validate(e) for e in entries]


@router.get("/recent", response_model=list[PointHistoryResponse])
async def get_recent(
    limit: int = Query(10, ge=1, le=100),
    user_id: int = Depends(get_current_user_id),
    query: GetPointHistoryQuery = Depends(get_point_history_query),
) -> list[PointHistoryResponse]:
    entries = await query.recent(user_id, limit)
    return [PointHistoryResponse.model_validate(e) for e in entries]


@router.get("/monthly", response_model=MonthlyEarnedResponse)
async def get_monthly_earned(
    year: int = Query(..., ge=2000, le=9999),
    month: int = Query(..., ge=1, le=12),
    user_id: int = Depends(get_current_user_id),
    query: GetPointHistoryQuery = Depends(get_point_history_query),
) -> MonthlyEarnedResponse:
    earned = await query.monthly_earned(user_id, year, month)
    return MonthlyEarnedResponse(year=year, month=month, earned=earned)


@router.get("/statistics", response_model=PointStatisticsResponse)
async def get_statistics(
    user_id: int = Depends(get_current_user_id),
    query: GetPointStatisticsQuery = Depends(get_point_statistics_query),
) -> PointStatisticsResponse:
    stats = await query.statistics(user_id)
    return PointStatisticsResponse.model_validate(stats)


@router.get("/reconciliation", response_model=ReconciliationResponse)
async def get_reconciliation(
    user_id: int = Depends(get_current_user_id),
    query: GetPointStatisticsQuery = Depends(get_point_statistics_query),
) -> ReconciliationResponse:
    """캐시 잔액과 원장 재계산 잔액 비교."""
    result = await query.reconcile(user_id)
    return ReconciliationResponse(
        user_id=result.user_id,
        cached_balance=result.cached_balance,
        replayed_balance=result.replayed_balance,
        consistent=result.consistent,
    )
