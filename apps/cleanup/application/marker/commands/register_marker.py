"""Register marker command - 쓰레기 위치 제보."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from apps.cleanup.domain.entities import Marker
from apps.cleanup.domain.value_objects import Coordinates

if TYPE_CHECKING:
    from apps.cleanup.application.common.ports import TransactionManager
    from apps.cleanup.application.marker.ports import MarkerCommandGateway

logger = logging.getLogger(__name__)


class RegisterMarkerCommand:
    """마커 등록 유스케이스."""

    def __init__(
        self,
        marker_command: MarkerCommandGateway,
        transaction_manager: TransactionManager,
    ) -> None:
        self._marker_command = marker_command
        self._tx = transaction_manager

    async def execute(
        self,
        reporter_id: int,
        lat: Decimal | float | str,
        lng: Decimal | float | str,
        description: str | None = None,
        address: str | None = None,
    ) -> Marker:
        """ACTIVE 상태의 마커를 생성합니다.

        Raises:
            InvalidCoordinatesError: 좌표 범위 오류
        """
        coordinates = Coordinates.of(lat, lng)
        marker = Marker.report(
            reported_by=reporter_id,
            coordinates=coordinates,
            description=description,
            address=address,
        )
        marker = await self._marker_command.add(marker)
        await self._tx.commit()

        logger.info(
            "Marker registered",
            extra={"marker_id": marker.id, "user_id": reporter_id},
        )
        return marker
