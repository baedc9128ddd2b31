"""Common application exceptions."""

from apps.cleanup.application.common.exceptions.base import (
    ApplicationError,
    ForbiddenError,
    InvalidRequestError,
    NotFoundError,
    ValidationError,
)
from apps.cleanup.application.common.exceptions.storage import (
    ImageNotFoundError,
    ImageStorageError,
)
from apps.cleanup.application.common.exceptions.not_found import (
    MarkerNotFoundError,
    NotMarkerParticipantError,
    NotMarkerReporterError,
    RewardNotFoundError,
)

__all__ = [
    "ApplicationError",
    "ForbiddenError",
    "ImageNotFoundError",
    "ImageStorageError",
    "InvalidRequestError",
    "MarkerNotFoundError",
    "NotFoundError",
    "NotMarkerParticipantError",
    "NotMarkerReporterError",
    "RewardNotFoundError",
    "ValidationError",
]
