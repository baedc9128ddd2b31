"""Cleanup Domain Exceptions."""

from apps.cleanup.domain.exceptions.base import DomainError
from apps.cleanup.domain.exceptions.marker import (
    InvalidCoordinatesError,
    InvalidMarkerTransitionError,
)
from apps.cleanup.domain.exceptions.photo import (
    PhotoNotVerifiableError,
    VerificationGuardSkip,
)
from apps.cleanup.domain.exceptions.point import InsufficientBalanceError
from apps.cleanup.domain.exceptions.reward import (
    InvalidPinError,
    PinAlreadyUsedError,
    PinExpiredError,
)

__all__ = [
    "DomainError",
    "InsufficientBalanceError",
    "InvalidCoordinatesError",
    "InvalidMarkerTransitionError",
    "InvalidPinError",
    "PhotoNotVerifiableError",
    "PinAlreadyUsedError",
    "PinExpiredError",
    "VerificationGuardSkip",
]
