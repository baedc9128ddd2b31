"""Shared metadata / registry for cleanup schema."""

from __future__ import annotations

from enum import Enum as PyEnum

from sqlalchemy import Enum, MetaData
from sqlalchemy.orm import registry

from apps.cleanup.infrastructure.persistence_postgres.constants import CLEANUP_SCHEMA

# cleanup 스키마용 메타데이터
metadata = MetaData(schema=CLEANUP_SCHEMA)
mapper_registry = registry(metadata=metadata)


def enum_column_type(enum_cls: type[PyEnum], name: str) -> Enum:
    """enum 값을 VARCHAR로 저장합니다 (ACTIVE, PENDING ...)."""
    return Enum(
        enum_cls,
        name=name,
        native_enum=False,
        length=20,
        values_callable=lambda e: [m.value for m in e],
    )
