"""Verification DTOs."""

from apps.cleanup.application.verification.dto.events import PhotoUploadedEvent
from apps.cleanup.application.verification.dto.result import (
    VerificationOutcome,
    VerificationRequestDTO,
    VerificationResult,
    VerificationStatusDTO,
)

__all__ = [
    "PhotoUploadedEvent",
    "VerificationOutcome",
    "VerificationRequestDTO",
    "VerificationResult",
    "VerificationStatusDTO",
]
