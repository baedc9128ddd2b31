"""SQLAlchemy implementation of marker / photo gateways."""

from __future__ import annotations

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from apps.cleanup.domain.entities import Marker, Photo
from apps.cleanup.domain.enums import MarkerStatus, PhotoKind


class SqlaMarkerQueryGateway:
    """마커 조회 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, marker_id: int) -> Marker | None:
        return await self._session.get(Marker, marker_id)

    async def list_active(self, limit: int = 100, offset: int = 0) -> list[Marker]:
        result = await self._session.execute(
            select(Marker)
            .where(Marker.status == MarkerStatus.ACTIVE)
            .order_by(Marker.created_at.desc(), Marker.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    async def list_by_reporter(self, user_id: int) -> list[Marker]:
        result = await self._session.execute(
            select(Marker)
            .where(Marker.reported_by == user_id, Marker.status != MarkerStatus.REMOVED)
            .order_by(Marker.created_at.desc(), Marker.id.desc())
        )
        return list(result.scalars().all())


class SqlaMarkerCommandGateway:
    """마커 수정 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, marker: Marker) -> Marker:
        self._session.add(marker)
        await self._session.flush()
        return marker

    async def get_for_update(self, marker_id: int) -> Marker | None:
        result = await self._session.execute(
            select(Marker)
            .where(Marker.id == marker_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()


class SqlaPhotoQueryGateway:
    """사진 조회 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_by_marker(
        self, marker_id: int, kind: PhotoKind | None = None
    ) -> list[Photo]:
        stmt = select(Photo).where(Photo.marker_id == marker_id)
        if kind is not None:
            stmt = stmt.where(Photo.kind == kind)
        result = await self._session.execute(stmt.order_by(Photo.created_at, Photo.id))
        return list(result.scalars().all())

    async def count_by_kind(self, marker_id: int) -> dict[PhotoKind, int]:
        result = await self._session.execute(
            select(Photo.kind, func.count(Photo.id))
            .where(Photo.marker_id == marker_id)
            .group_by(Photo.kind)
        )
        return {kind: count for kind, count in result.all()}


class SqlaPhotoCommandGateway:
    """사진 수정 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add_all(self, photos: list[Photo]) -> list[Photo]:
        self._session.add_all(photos)
        await self._session.flush()
        return photos

    async def get_for_update(self, photo_id: int) -> Photo | None:
        result = await self._session.execute(
            select(Photo)
            .where(Photo.id == photo_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def delete_by_marker(self, marker_id: int) -> int:
        result = await self._session.execute(
            delete(Photo).where(Photo.marker_id == marker_id)
        )
        await self._session.flush()
        return result.rowcount or 0
