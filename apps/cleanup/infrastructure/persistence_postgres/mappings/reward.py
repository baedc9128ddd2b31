"""Reward / RewardPin ORM mapping - cleanup.rewards, cleanup.reward_pins."""

from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    func,
)

from apps.cleanup.domain.entities import Reward, RewardPin
from apps.cleanup.domain.enums import RewardStatus
from apps.cleanup.infrastructure.persistence_postgres.constants import (
    CLEANUP_SCHEMA,
    REWARD_PINS_TABLE,
    REWARDS_TABLE,
    USERS_TABLE,
)
from apps.cleanup.infrastructure.persistence_postgres.mappings.base import (
    enum_column_type,
    mapper_registry,
    metadata,
)

rewards_table = Table(
    REWARDS_TABLE,
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        BigInteger,
        ForeignKey(f"{CLEANUP_SCHEMA}.{USERS_TABLE}.id"),
        nullable=False,
        index=True,
    ),
    Column("points_used", Integer, nullable=False),
    Column("reward_type", String(50), nullable=False),
    Column("status", enum_column_type(RewardStatus, "reward_status"), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("processed_at", DateTime(timezone=True), nullable=True),
)

# reward_id 1:1, pin_number 전역 유일
reward_pins_table = Table(
    REWARD_PINS_TABLE,
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "reward_id",
        BigInteger,
        ForeignKey(f"{CLEANUP_SCHEMA}.{REWARDS_TABLE}.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column("pin_number", String(19), nullable=False, unique=True),
    Column("issued_at", DateTime(timezone=True), nullable=False),
    Column("expires_at", DateTime(timezone=True), nullable=False),
    Column("is_used", Boolean, nullable=False, server_default="false"),
    Column("used_at", DateTime(timezone=True), nullable=True),
)


def start_reward_mappers() -> None:
    """Reward, RewardPin 엔티티를 매핑합니다."""
    if not hasattr(Reward, "__mapper__"):
        mapper_registry.map_imperatively(Reward, rewards_table)
    if not hasattr(RewardPin, "__mapper__"):
        mapper_registry.map_imperatively(RewardPin, reward_pins_table)
