"""Marker queries."""

from apps.cleanup.application.marker.queries.get_markers import (
    GetMarkerQuery,
    ListMarkersQuery,
)

__all__ = ["GetMarkerQuery", "ListMarkersQuery"]
