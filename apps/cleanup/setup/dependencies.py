"""Dependency injection setup."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

import boto3
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apps.cleanup.application.common.ports import ImageStore
from apps.cleanup.application.marker.commands import (
    RegisterMarkerCommand,
    RemoveMarkerCommand,
    UploadPhotosCommand,
)
from apps.cleanup.application.marker.queries import GetMarkerQuery, ListMarkersQuery
from apps.cleanup.application.point.queries import GetPointHistoryQuery, GetPointStatisticsQuery
from apps.cleanup.application.point.services import PointLedger
from apps.cleanup.application.reward.commands import ExchangeRewardCommand, RedeemPinCommand
from apps.cleanup.application.reward.queries import GetRewardsQuery
from apps.cleanup.application.verification.commands import (
    RetriggerVerificationCommand,
    VerifyMarkerCommand,
)
from apps.cleanup.application.verification.ports import (
    VerificationEventPublisher,
    VerificationJudge,
)
from apps.cleanup.application.verification.queries import GetVerificationStatusQuery
from apps.cleanup.domain.services import PinGenerator, PointPolicy
from apps.cleanup.infrastructure.asset_loader import load_prompt
from apps.cleanup.infrastructure.llm.gpt import GPTVerificationJudge
from apps.cleanup.infrastructure.messaging import CeleryVerificationEventPublisher
from apps.cleanup.infrastructure.persistence_postgres.adapters import (
    SqlaMarkerCommandGateway,
    SqlaMarkerQueryGateway,
    SqlaPhotoCommandGateway,
    SqlaPhotoQueryGateway,
    SqlaPointHistoryGateway,
    SqlaRewardGateway,
    SqlaRewardPinGateway,
    SqlaTransactionManager,
    SqlaUserGateway,
)
from apps.cleanup.infrastructure.storage import ImageNormalizer, LocalImageStore, S3ImageStore
from apps.cleanup.setup.config import get_settings
from apps.cleanup.setup.database import get_db_session

# Type alias for dependency injection
SessionDep = Annotated[AsyncSession, Depends(get_db_session)]

VERIFICATION_PROMPT = "cleanup_verification"


# Infrastructure singletons
@lru_cache
def get_image_store() -> ImageStore:
    """설정에 따른 ImageStore 인스턴스를 반환합니다."""
    settings = get_settings()
    if settings.image_storage_backend == "s3":
        s3_client = boto3.client("s3", region_name=settings.s3_region)
        return S3ImageStore(s3_client, settings.s3_bucket, settings.s3_prefix)
    return LocalImageStore(settings.image_storage_path)


@lru_cache
def get_event_publisher() -> VerificationEventPublisher:
    """Celery 검증 이벤트 발행자를 반환합니다."""
    from apps.cleanup.setup.celery import celery_app

    return CeleryVerificationEventPublisher(
        celery_app, propagate_trace=get_settings().otel_enabled
    )


def build_verification_judge() -> GPTVerificationJudge:
    """GPT Judge를 생성합니다.

    AsyncOpenAI 클라이언트는 이벤트 루프에 묶이므로 태스크마다 새로 만들고 닫습니다.
    """
    settings = get_settings()
    api_key = settings.openai_api_key.get_secret_value() if settings.openai_api_key else None
    return GPTVerificationJudge(
        image_store=get_image_store(),
        prompt=load_prompt(VERIFICATION_PROMPT),
        normalizer=ImageNormalizer(
            max_side=settings.judge_max_image_side,
            quality=settings.judge_jpeg_quality,
        ),
        model=settings.judge_model,
        timeout_seconds=settings.judge_timeout_seconds,
        api_key=api_key,
    )


# Domain Services
def get_point_policy() -> PointPolicy:
    """설정값 기반 PointPolicy를 반환합니다."""
    settings = get_settings()
    return PointPolicy(
        base_points=settings.points_base,
        bonus_points=settings.points_bonus,
        bonus_threshold=settings.points_bonus_threshold,
    )


def build_point_ledger(session: AsyncSession) -> PointLedger:
    return PointLedger(
        user_gateway=SqlaUserGateway(session),
        history_gateway=SqlaPointHistoryGateway(session),
        policy=get_point_policy(),
    )


def build_verify_marker_command(
    session: AsyncSession,
    judge: VerificationJudge,
) -> VerifyMarkerCommand:
    """Worker용 VerifyMarkerCommand를 조립합니다."""
    return VerifyMarkerCommand(
        marker_query=SqlaMarkerQueryGateway(session),
        marker_command=SqlaMarkerCommandGateway(session),
        photo_query=SqlaPhotoQueryGateway(session),
        photo_command=SqlaPhotoCommandGateway(session),
        judge=judge,
        ledger=build_point_ledger(session),
        transaction_manager=SqlaTransactionManager(session),
    )


# Marker
def get_register_marker_command(session: SessionDep) -> RegisterMarkerCommand:
    return RegisterMarkerCommand(
        marker_command=SqlaMarkerCommandGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )


def get_upload_photos_command(
    session: SessionDep,
    image_store: ImageStore = Depends(get_image_store),
    publisher: VerificationEventPublisher = Depends(get_event_publisher),
) -> UploadPhotosCommand:
    return UploadPhotosCommand(
        marker_query=SqlaMarkerQueryGateway(session),
        photo_command=SqlaPhotoCommandGateway(session),
        image_store=image_store,
        event_publisher=publisher,
        transaction_manager=SqlaTransactionManager(session),
    )


def get_remove_marker_command(
    session: SessionDep,
    image_store: ImageStore = Depends(get_image_store),
) -> RemoveMarkerCommand:
    return RemoveMarkerCommand(
        marker_command=SqlaMarkerCommandGateway(session),
        photo_query=SqlaPhotoQueryGateway(session),
        photo_command=SqlaPhotoCommandGateway(session),
        image_store=image_store,
        transaction_manager=SqlaTransactionManager(session),
    )


def get_get_marker_query(session: SessionDep) -> GetMarkerQuery:
    return GetMarkerQuery(SqlaMarkerQueryGateway(session))


def get_list_markers_query(session: SessionDep) -> ListMarkersQuery:
    return ListMarkersQuery(SqlaMarkerQueryGateway(session))


def get_verification_status_query(session: SessionDep) -> GetVerificationStatusQuery:
    return GetVerificationStatusQuery(
        marker_query=SqlaMarkerQueryGateway(session),
        photo_query=SqlaPhotoQueryGateway(session),
    )


def get_retrigger_verification_command(
    session: SessionDep,
    publisher: VerificationEventPublisher = Depends(get_event_publisher),
) -> RetriggerVerificationCommand:
    return RetriggerVerificationCommand(
        marker_query=SqlaMarkerQueryGateway(session),
        photo_query=SqlaPhotoQueryGateway(session),
        event_publisher=publisher,
    )


# Point
def get_point_history_query(session: SessionDep) -> GetPointHistoryQuery:
    return GetPointHistoryQuery(SqlaPointHistoryGateway(session))


def get_point_statistics_query(session: SessionDep) -> GetPointStatisticsQuery:
    return GetPointStatisticsQuery(
        user_gateway=SqlaUserGateway(session),
        history_gateway=SqlaPointHistoryGateway(session),
    )


# Reward
def get_exchange_reward_command(session: SessionDep) -> ExchangeRewardCommand:
    return ExchangeRewardCommand(
        ledger=build_point_ledger(session),
        reward_gateway=SqlaRewardGateway(session),
        pin_gateway=SqlaRewardPinGateway(session),
        transaction_manager=SqlaTransactionManager(session),
        pin_generator=PinGenerator(),
        max_attempts=get_settings().pin_max_attempts,
    )


def get_redeem_pin_command(session: SessionDep) -> RedeemPinCommand:
    return RedeemPinCommand(
        pin_gateway=SqlaRewardPinGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )


def get_rewards_query(session: SessionDep) -> GetRewardsQuery:
    return GetRewardsQuery(
        reward_gateway=SqlaRewardGateway(session),
        pin_gateway=SqlaRewardPinGateway(session),
    )
