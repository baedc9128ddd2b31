"""SQLAlchemy ORM mappings."""

from apps.cleanup.infrastructure.persistence_postgres.mappings.base import metadata
from apps.cleanup.infrastructure.persistence_postgres.mappings.marker import (
    markers_table,
    photos_table,
    start_marker_mappers,
)
from apps.cleanup.infrastructure.persistence_postgres.mappings.point import (
    point_histories_table,
    start_point_mappers,
    users_table,
)
from apps.cleanup.infrastructure.persistence_postgres.mappings.reward import (
    reward_pins_table,
    rewards_table,
    start_reward_mappers,
)


def start_mappers() -> None:
    """모든 ORM 매핑을 시작합니다."""
    start_marker_mappers()
    start_point_mappers()
    start_reward_mappers()


__all__ = [
    "markers_table",
    "metadata",
    "photos_table",
    "point_histories_table",
    "reward_pins_table",
    "rewards_table",
    "start_mappers",
    "users_table",
]
