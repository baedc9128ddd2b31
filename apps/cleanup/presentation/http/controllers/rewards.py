"""Reward controller - 상품권 교환/조회, 핀번호 사용."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from apps.cleanup.application.reward.commands import ExchangeRewardCommand, RedeemPinCommand
from apps.cleanup.application.reward.queries import GetRewardsQuery
from apps.cleanup.presentation.http.auth import get_current_user_id
from apps.cleanup.presentation.http.schemas import (
    PinRedeemRequest,
    PinRedeemResponse,
    PinResponse,
    RewardExchangeRequest,
    RewardExchangeResponse,
    RewardResponse,
)
from apps.cleanup.setup.dependencies import (
    get_exchange_reward_command,
    get_redeem_pin_command,
    get_rewards_query,
)

router = APIRouter(prefix="/rewards", tags=["rewards"])


@router.post(
    "/exchange",
    response_model=RewardExchangeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def exchange_reward(
    request: RewardExchangeRequest,
    user_id: int = Depends(get_current_user_id),
    command: ExchangeRewardCommand = Depends(get_exchange_reward_command),
) -> RewardExchangeResponse:
    """포인트를 상품권으로 교환합니다. 전체 핀번호는 이 응답에서만 제공됩니다."""
    issued = await command.execute(user_id, request.points, request.reward_type)
    return RewardExchangeResponse(
        reward_id=issued.reward.id,
        reward_type=issued.reward.reward_type,
        points_used=issued.reward.points_used,
        status=issued.reward.status.value,
        pin_number=issued.pin_number,
        issued_at=issued.pin.issued_at,
        expires_at=issued.pin.expires_at,
        remaining_points=issued.remaining_points,
    )


@router.get("", response_model=list[RewardResponse])
async def list_rewards(
    user_id: int = Depends(get_current_user_id),
    query: GetRewardsQuery = Depends(get_rewards_query),
) -> list[RewardResponse]:
    """교환 내역 (핀번호 마스킹)."""
    rewards = await query.list_by_user(user_id)
    return [RewardResponse.model_validate(r) for r in rewards]


@router.get("/pins", response_model=list[PinResponse])
async def list_pins(
    used: bool = Query(False, description="true면 사용한 핀번호"),
    user_id: int = Depends(get_current_user_id),
    query: GetRewardsQuery = Depends(get_rewards_query),
) -> list[PinResponse]:
    pins = await (query.used_pins(user_id) if used else query.available_pins(user_id))
    return [PinResponse.model_validate(p) for p in pins]


@router.get("/{reward_id}", response_model=RewardResponse)
async def get_reward(
    reward_id: int,
    user_id: int = Depends(get_current_user_id),
    query: GetRewardsQuery = Depends(get_rewards_query),
) -> RewardResponse:
    reward = await query.get(user_id, reward_id)
    return RewardResponse.model_validate(reward)


@router.post("/pins/redeem", response_model=PinRedeemResponse)
async def redeem_pin(
    request: PinRedeemRequest,
    command: RedeemPinCommand = Depends(get_redeem_pin_command),
) -> PinRedeemResponse:
    """핀번호를 사용 처리합니다."""
    pin = await command.execute(request.pin_number)
    return PinRedeemResponse(
        reward_id=pin.reward_id,
        masked_pin_number=pin.masked_pin_number,
        is_used=pin.is_used,
        used_at=pin.used_at,
    )
