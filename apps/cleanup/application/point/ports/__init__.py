"""Point ledger ports (interfaces)."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.cleanup.domain.entities import PointHistory, User
    from apps.cleanup.domain.enums import PointType


class UserGateway(Protocol):
    """포인트 계정 포트."""

    async def get_by_id(self, user_id: int) -> User | None:
        ...

    async def get_for_update(self, user_id: int) -> User | None:
        """행 잠금과 함께 조회합니다."""
        ...

    async def get_or_create_for_update(self, user_id: int) -> User:
        """계정이 없으면 잔액 0으로 생성한 뒤 잠금과 함께 조회합니다."""
        ...


class PointHistoryGateway(Protocol):
    """포인트 원장 포트 (append-only).

    수정/삭제 메서드는 제공하지 않습니다.
    """

    async def append(self, entry: PointHistory) -> PointHistory:
        ...

    async def list_by_user(
        self,
        user_id: int,
        point_type: PointType | None = None,
        limit: int | None = None,
    ) -> list[PointHistory]:
        """최신순으로 조회합니다."""
        ...

    async def list_by_user_between(
        self, user_id: int, start: datetime, end: datetime
    ) -> list[PointHistory]:
        """[start, end) 구간을 최신순으로 조회합니다."""
        ...

    async def sum_delta(
        self,
        user_id: int,
        point_type: PointType | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> int:
        """delta 합계 (항목이 없으면 0)."""
        ...


__all__ = ["PointHistoryGateway", "UserGateway"]
