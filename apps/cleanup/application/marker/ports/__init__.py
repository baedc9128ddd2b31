"""Marker ports."""

from apps.cleanup.application.marker.ports.marker_gateway import (
    MarkerCommandGateway,
    MarkerQueryGateway,
)
from apps.cleanup.application.marker.ports.photo_gateway import (
    PhotoCommandGateway,
    PhotoQueryGateway,
)

__all__ = [
    "MarkerCommandGateway",
    "MarkerQueryGateway",
    "PhotoCommandGateway",
    "PhotoQueryGateway",
]
