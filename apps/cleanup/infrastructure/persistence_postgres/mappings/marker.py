"""Marker / Photo ORM mapping - cleanup.markers, cleanup.photos."""

from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Numeric,
    String,
    Table,
    Text,
    func,
)

from apps.cleanup.domain.entities import Marker, Photo
from apps.cleanup.domain.enums import MarkerStatus, PhotoKind, VerificationStatus
from apps.cleanup.infrastructure.persistence_postgres.constants import (
    CLEANUP_SCHEMA,
    MARKERS_TABLE,
    PHOTOS_TABLE,
)
from apps.cleanup.infrastructure.persistence_postgres.mappings.base import (
    enum_column_type,
    mapper_registry,
    metadata,
)

markers_table = Table(
    MARKERS_TABLE,
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("reported_by", BigInteger, nullable=False, index=True),
    Column("lat", Numeric(10, 8), nullable=False),
    Column("lng", Numeric(11, 8), nullable=False),
    Column("description", Text, nullable=True),
    Column("address", Text, nullable=True),
    Column(
        "status",
        enum_column_type(MarkerStatus, "marker_status"),
        nullable=False,
        index=True,
    ),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)

# 사진은 마커 삭제 시 함께 삭제 (FK CASCADE)
photos_table = Table(
    PHOTOS_TABLE,
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "marker_id",
        BigInteger,
        ForeignKey(f"{CLEANUP_SCHEMA}.{MARKERS_TABLE}.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("uploaded_by", BigInteger, nullable=False, index=True),
    Column("image_ref", String(500), nullable=False),
    Column("kind", enum_column_type(PhotoKind, "photo_kind"), nullable=False),
    Column(
        "verification_status",
        enum_column_type(VerificationStatus, "verification_status"),
        nullable=False,
    ),
    Column("judge_raw_output", Text, nullable=True),
    Column("confidence", Float, nullable=True),
    Column("rationale", Text, nullable=True),
    Column("verified_at", DateTime(timezone=True), nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Index("ix_photos_marker_kind", "marker_id", "kind", "created_at"),
)


def start_marker_mappers() -> None:
    """Marker, Photo 엔티티를 매핑합니다."""
    if not hasattr(Marker, "__mapper__"):
        mapper_registry.map_imperatively(Marker, markers_table)
    if not hasattr(Photo, "__mapper__"):
        mapper_registry.map_imperatively(Photo, photos_table)
