"""Verification queries."""

from apps.cleanup.application.verification.queries.get_verification_status import (
    GetVerificationStatusQuery,
)

__all__ = ["GetVerificationStatusQuery"]
