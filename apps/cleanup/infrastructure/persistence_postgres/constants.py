"""Database schema and table constants.

PostgreSQL 스키마 및 테이블 관련 상수들을 정의합니다.
"""

# =============================================================================
# Schema Names
# =============================================================================
CLEANUP_SCHEMA = "cleanup"

# =============================================================================
# Table Names (cleanup schema)
# =============================================================================
MARKERS_TABLE = "markers"
PHOTOS_TABLE = "photos"
USERS_TABLE = "users"
POINT_HISTORIES_TABLE = "point_histories"
REWARDS_TABLE = "rewards"
REWARD_PINS_TABLE = "reward_pins"
