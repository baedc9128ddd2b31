"""Point queries."""

from apps.cleanup.application.point.queries.get_point_history import (
    GetPointHistoryQuery,
    month_range,
)
from apps.cleanup.application.point.queries.get_point_statistics import (
    GetPointStatisticsQuery,
)

__all__ = ["GetPointHistoryQuery", "GetPointStatisticsQuery", "month_range"]
