"""Marker 도메인 예외."""

from apps.cleanup.domain.exceptions.base import DomainError


class InvalidCoordinatesError(DomainError):
    """좌표 범위를 벗어남."""

    def __init__(self, lat: object, lng: object) -> None:
        self.lat = lat
        self.lng = lng
        super().__init__(f"Invalid coordinates: lat={lat}, lng={lng}")


class InvalidMarkerTransitionError(DomainError):
    """허용되지 않는 마커 상태 전이."""

    def __init__(self, marker_id: int | None, current: str, target: str) -> None:
        self.marker_id = marker_id
        self.current = current
        self.target = target
        super().__init__(
            f"Marker {marker_id} cannot transition from {current} to {target}"
        )
