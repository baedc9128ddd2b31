"""SQLAlchemy gateway adapters."""

from apps.cleanup.infrastructure.persistence_postgres.adapters.marker_gateway_sqla import (
    SqlaMarkerCommandGateway,
    SqlaMarkerQueryGateway,
    SqlaPhotoCommandGateway,
    SqlaPhotoQueryGateway,
)
from apps.cleanup.infrastructure.persistence_postgres.adapters.point_gateway_sqla import (
    SqlaPointHistoryGateway,
    SqlaUserGateway,
)
from apps.cleanup.infrastructure.persistence_postgres.adapters.reward_gateway_sqla import (
    SqlaRewardGateway,
    SqlaRewardPinGateway,
)
from apps.cleanup.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)

__all__ = [
    "SqlaMarkerCommandGateway",
    "SqlaMarkerQueryGateway",
    "SqlaPhotoCommandGateway",
    "SqlaPhotoQueryGateway",
    "SqlaPointHistoryGateway",
    "SqlaRewardGateway",
    "SqlaRewardPinGateway",
    "SqlaTransactionManager",
    "SqlaUserGateway",
]
