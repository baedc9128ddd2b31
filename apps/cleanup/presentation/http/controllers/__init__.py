"""HTTP controllers."""

from apps.cleanup.presentation.http.controllers.health import router as health_router
from apps.cleanup.presentation.http.controllers.markers import router as markers_router
from apps.cleanup.presentation.http.controllers.points import router as points_router
from apps.cleanup.presentation.http.controllers.rewards import router as rewards_router

__all__ = ["health_router", "markers_router", "points_router", "rewards_router"]
