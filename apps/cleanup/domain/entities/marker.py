"""Marker entity - 쓰레기 위치 제보."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from apps.cleanup.domain.clock import utcnow
from apps.cleanup.domain.enums import MarkerStatus
from apps.cleanup.domain.exceptions import InvalidMarkerTransitionError
from apps.cleanup.domain.value_objects import Coordinates


@dataclass
class Marker:
    """마커 엔티티.

    사진은 photo.marker_id로만 참조합니다 (역참조 컬렉션 없음).

    Attributes:
        reported_by: 제보자 사용자 ID
        lat: 위도
        lng: 경도
        description: 위치 설명 (예: "공원 입구 쓰레기통 옆")
        address: 실제 주소
        status: 마커 상태
    """

    reported_by: int
    lat: Decimal
    lng: Decimal
    description: str | None = None
    address: str | None = None
    status: MarkerStatus = MarkerStatus.ACTIVE
    id: int | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @classmethod
    def report(
        cls,
        reported_by: int,
        coordinates: Coordinates,
        description: str | None = None,
        address: str | None = None,
    ) -> Marker:
        return cls(
            reported_by=reported_by,
            lat=coordinates.lat,
            lng=coordinates.lng,
            description=description,
            address=address,
        )

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(lat=self.lat, lng=self.lng)

    @property
    def location_hint(self) -> str:
        """Judge에 전달할 위치 문맥."""
        parts = [p for p in (self.description, self.address) if p]
        return " / ".join(parts) if parts else "위치 설명 없음"

    def is_active(self) -> bool:
        return self.status == MarkerStatus.ACTIVE

    def is_cleaned(self) -> bool:
        return self.status == MarkerStatus.CLEANED

    def is_removed(self) -> bool:
        return self.status == MarkerStatus.REMOVED

    def is_reported_by(self, user_id: int) -> bool:
        return self.reported_by == user_id

    def mark_cleaned(self) -> bool:
        """청소 완료로 전이합니다.

        Returns:
            상태가 실제로 바뀌었으면 True (이미 CLEANED면 False)

        Raises:
            InvalidMarkerTransitionError: REMOVED 마커
        """
        if self.status == MarkerStatus.CLEANED:
            return False
        if self.status == MarkerStatus.REMOVED:
            raise InvalidMarkerTransitionError(
                self.id, self.status.value, MarkerStatus.CLEANED.value
            )
        self.status = MarkerStatus.CLEANED
        self.updated_at = utcnow()
        return True

    def mark_removed(self) -> None:
        """삭제됨으로 전이합니다 (ACTIVE/CLEANED → REMOVED)."""
        if self.status == MarkerStatus.REMOVED:
            raise InvalidMarkerTransitionError(
                self.id, self.status.value, MarkerStatus.REMOVED.value
            )
        self.status = MarkerStatus.REMOVED
        self.updated_at = utcnow()
