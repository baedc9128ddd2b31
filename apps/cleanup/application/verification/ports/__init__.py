"""Verification ports."""

from apps.cleanup.application.verification.ports.event_publisher import (
    VerificationEventPublisher,
)
from apps.cleanup.application.verification.ports.verification_judge import VerificationJudge

__all__ = ["VerificationEventPublisher", "VerificationJudge"]
