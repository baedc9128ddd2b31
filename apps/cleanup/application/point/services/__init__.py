"""Point application services."""

from apps.cleanup.application.point.services.point_ledger import (
    EXCHANGE_CANCEL_DESCRIPTION,
    PointLedger,
)

__all__ = ["EXCHANGE_CANCEL_DESCRIPTION", "PointLedger"]
