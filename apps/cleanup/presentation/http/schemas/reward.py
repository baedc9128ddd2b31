"""Reward schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RewardExchangeRequest(BaseModel):
    """상품권 교환 요청. 값 검증은 유스케이스에서 수행합니다."""

    points: int | None = Field(None, description="사용할 포인트")
    reward_type: str | None = Field(None, description="상품권 타입 (예: FIVE_THOUSAND)")


class RewardExchangeResponse(BaseModel):
    """교환 직후 응답. 전체 핀번호는 이 응답에서만 노출됩니다."""

    reward_id: int
    reward_type: str
    points_used: int
    status: str
    pin_number: str
    issued_at: datetime
    expires_at: datetime
    remaining_points: int


class PinResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    pin_id: int | None = None
    reward_id: int
    masked_pin_number: str
    issued_at: datetime
    expires_at: datetime
    is_used: bool
    used_at: datetime | None = None


class RewardResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    reward_id: int | None = None
    points_used: int
    reward_type: str
    status: str
    created_at: datetime
    processed_at: datetime | None = None
    pin: PinResponse | None = None


class PinRedeemRequest(BaseModel):
    pin_number: str = Field(..., min_length=1, max_length=19)


class PinRedeemResponse(BaseModel):
    reward_id: int
    masked_pin_number: str
    is_used: bool
    used_at: datetime | None = None
