"""User / PointHistory ORM mapping - cleanup.users, cleanup.point_histories.

point_histories는 append-only 원장입니다. UPDATE/DELETE 경로를 두지 않습니다.
"""

from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
    func,
)

from apps.cleanup.domain.entities import PointHistory, User
from apps.cleanup.domain.enums import PointType
from apps.cleanup.infrastructure.persistence_postgres.constants import (
    CLEANUP_SCHEMA,
    PHOTOS_TABLE,
    POINT_HISTORIES_TABLE,
    USERS_TABLE,
)
from apps.cleanup.infrastructure.persistence_postgres.mappings.base import (
    enum_column_type,
    mapper_registry,
    metadata,
)

# id는 인증 게이트웨이의 사용자 ID (autoincrement 아님)
users_table = Table(
    USERS_TABLE,
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=False),
    Column("username", String(120), nullable=True),
    Column("points", Integer, nullable=False, server_default="0"),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)

point_histories_table = Table(
    POINT_HISTORIES_TABLE,
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        BigInteger,
        ForeignKey(f"{CLEANUP_SCHEMA}.{USERS_TABLE}.id"),
        nullable=False,
    ),
    Column("delta", Integer, nullable=False),
    Column("type", enum_column_type(PointType, "point_type"), nullable=False),
    Column("description", Text, nullable=False),
    Column(
        "related_photo_id",
        BigInteger,
        ForeignKey(f"{CLEANUP_SCHEMA}.{PHOTOS_TABLE}.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Index("ix_point_histories_user_created", "user_id", "created_at"),
)


def start_point_mappers() -> None:
    """User, PointHistory 엔티티를 매핑합니다."""
    if not hasattr(User, "__mapper__"):
        mapper_registry.map_imperatively(User, users_table)
    if not hasattr(PointHistory, "__mapper__"):
        mapper_registry.map_imperatively(PointHistory, point_histories_table)
