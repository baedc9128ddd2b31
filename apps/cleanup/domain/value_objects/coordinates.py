"""Coordinates Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from apps.cleanup.domain.exceptions.marker import InvalidCoordinatesError

# DB 컬럼 정밀도와 동일 (소수점 8자리)
COORDINATE_SCALE = Decimal("0.00000001")


@dataclass(frozen=True, slots=True)
class Coordinates:
    """위경도 좌표.

    Attributes:
        lat: 위도 (-90 ~ 90)
        lng: 경도 (-180 ~ 180)
    """

    lat: Decimal
    lng: Decimal

    @classmethod
    def of(cls, lat: float | str | Decimal, lng: float | str | Decimal) -> Coordinates:
        """입력값을 검증하고 정규화된 좌표를 생성합니다.

        Raises:
            InvalidCoordinatesError: 숫자가 아니거나 범위를 벗어난 경우
        """
        try:
            dlat = Decimal(str(lat)).quantize(COORDINATE_SCALE)
            dlng = Decimal(str(lng)).quantize(COORDINATE_SCALE)
        except (InvalidOperation, ValueError):
            raise InvalidCoordinatesError(lat, lng)

        if not (Decimal(-90) <= dlat <= Decimal(90)):
            raise InvalidCoordinatesError(lat, lng)
        if not (Decimal(-180) <= dlng <= Decimal(180)):
            raise InvalidCoordinatesError(lat, lng)
        return cls(lat=dlat, lng=dlng)
