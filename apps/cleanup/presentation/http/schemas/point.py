"""Point ledger schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from apps.cleanup.domain.enums import PointType


class PointHistoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    delta: int
    type: PointType
    description: str
    related_photo_id: int | None = None
    created_at: datetime


class PointStatisticsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_earned: int
    total_used: int
    current_points: int
    available_points: int


class MonthlyEarnedResponse(BaseModel):
    year: int
    month: int
    earned: int


class ReconciliationResponse(BaseModel):
    user_id: int
    cached_balance: int
    replayed_balance: int
    consistent: bool
