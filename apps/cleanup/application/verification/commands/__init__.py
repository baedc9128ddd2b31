"""Verification commands."""

from apps.cleanup.application.verification.commands.retrigger_verification import (
    RetriggerVerificationCommand,
)
from apps.cleanup.application.verification.commands.verify_marker import VerifyMarkerCommand

__all__ = ["RetriggerVerificationCommand", "VerifyMarkerCommand"]
