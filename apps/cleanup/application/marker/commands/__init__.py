"""Marker commands."""

from apps.cleanup.application.marker.commands.register_marker import RegisterMarkerCommand
from apps.cleanup.application.marker.commands.remove_marker import RemoveMarkerCommand
from apps.cleanup.application.marker.commands.upload_photos import UploadPhotosCommand

__all__ = ["RegisterMarkerCommand", "RemoveMarkerCommand", "UploadPhotosCommand"]
