"""HTTP schemas."""

from apps.cleanup.presentation.http.schemas.marker import (
    MarkerCreateRequest,
    MarkerResponse,
    PhotoUploadResponse,
    VerificationRequestResponse,
    VerificationStatusResponse,
)
from apps.cleanup.presentation.http.schemas.point import (
    MonthlyEarnedResponse,
    PointHistoryResponse,
    PointStatisticsResponse,
    ReconciliationResponse,
)
from apps.cleanup.presentation.http.schemas.reward import (
    PinRedeemRequest,
    PinRedeemResponse,
    PinResponse,
    RewardExchangeRequest,
    RewardExchangeResponse,
    RewardResponse,
)

__all__ = [
    "MarkerCreateRequest",
    "MarkerResponse",
    "MonthlyEarnedResponse",
    "PhotoUploadResponse",
    "PinRedeemRequest",
    "PinRedeemResponse",
    "PinResponse",
    "PointHistoryResponse",
    "PointStatisticsResponse",
    "ReconciliationResponse",
    "RewardExchangeRequest",
    "RewardExchangeResponse",
    "RewardResponse",
    "VerificationRequestResponse",
    "VerificationStatusResponse",
]
