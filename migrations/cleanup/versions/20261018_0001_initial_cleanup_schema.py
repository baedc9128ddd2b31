"""Initial cleanup schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-18

Cleanup Domain Migration
Schema: cleanup.*

- cleanup.markers / cleanup.photos: 쓰레기 마커와 전/후 사진
- cleanup.users / cleanup.point_histories: 포인트 잔액 캐시와 append-only 원장
- cleanup.rewards / cleanup.reward_pins: 상품권 교환과 PIN
"""

from typing import Sequence

from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create cleanup schema tables.

    Note: enum 컬럼은 VARCHAR(20)로 저장합니다 (native enum 미사용).
    """
    op.execute("CREATE SCHEMA IF NOT EXISTS cleanup")

    # ============================================
    # cleanup.markers
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS cleanup.markers (
            id BIGSERIAL PRIMARY KEY,
            reported_by BIGINT NOT NULL,
            lat NUMERIC(10, 8) NOT NULL,
            lng NUMERIC(11, 8) NOT NULL,
            description TEXT,
            address TEXT,
            status VARCHAR(20) NOT NULL DEFAULT 'ACTIVE',
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),

            CONSTRAINT ck_markers_status
                CHECK (status IN ('ACTIVE', 'CLEANED', 'REMOVED')),
            CONSTRAINT ck_markers_lat CHECK (lat BETWEEN -90 AND 90),
            CONSTRAINT ck_markers_lng CHECK (lng BETWEEN -180 AND 180)
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_cleanup_markers_reported_by
        ON cleanup.markers(reported_by)
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_cleanup_markers_status
        ON cleanup.markers(status)
    """)

    # ============================================
    # cleanup.photos
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS cleanup.photos (
            id BIGSERIAL PRIMARY KEY,
            marker_id BIGINT NOT NULL,
            uploaded_by BIGINT NOT NULL,
            image_ref VARCHAR(500) NOT NULL,
            kind VARCHAR(20) NOT NULL,
            verification_status VARCHAR(20) NOT NULL DEFAULT 'PENDING',
            judge_raw_output TEXT,
            confidence DOUBLE PRECISION,
            rationale TEXT,
            verified_at TIMESTAMPTZ,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),

            CONSTRAINT fk_photos_marker
                FOREIGN KEY (marker_id) REFERENCES cleanup.markers(id) ON DELETE CASCADE,
            CONSTRAINT ck_photos_kind CHECK (kind IN ('BEFORE', 'AFTER')),
            CONSTRAINT ck_photos_verification_status
                CHECK (verification_status IN ('PENDING', 'APPROVED', 'REJECTED'))
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_cleanup_photos_uploaded_by
        ON cleanup.photos(uploaded_by)
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_photos_marker_kind
        ON cleanup.photos(marker_id, kind, created_at)
    """)

    # ============================================
    # cleanup.users
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS cleanup.users (
            id BIGINT PRIMARY KEY,
            username VARCHAR(120),
            points INTEGER NOT NULL DEFAULT 0,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),

            CONSTRAINT ck_users_points_non_negative CHECK (points >= 0)
        )
    """)

    # ============================================
    # cleanup.point_histories (append-only)
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS cleanup.point_histories (
            id BIGSERIAL PRIMARY KEY,
            user_id BIGINT NOT NULL,
            delta INTEGER NOT NULL,
            type VARCHAR(20) NOT NULL,
            description TEXT NOT NULL,
            related_photo_id BIGINT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),

            CONSTRAINT fk_point_histories_user
                FOREIGN KEY (user_id) REFERENCES cleanup.users(id),
            CONSTRAINT fk_point_histories_photo
                FOREIGN KEY (related_photo_id) REFERENCES cleanup.photos(id)
                ON DELETE SET NULL,
            CONSTRAINT ck_point_histories_type CHECK (type IN ('EARNED', 'USED')),
            CONSTRAINT ck_point_histories_sign CHECK (
                (type = 'EARNED' AND delta > 0) OR (type = 'USED' AND delta < 0)
            )
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_point_histories_user_created
        ON cleanup.point_histories(user_id, created_at)
    """)

    # ============================================
    # cleanup.rewards
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS cleanup.rewards (
            id BIGSERIAL PRIMARY KEY,
            user_id BIGINT NOT NULL,
            points_used INTEGER NOT NULL,
            reward_type VARCHAR(50) NOT NULL,
            status VARCHAR(20) NOT NULL DEFAULT 'PENDING',
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            processed_at TIMESTAMPTZ,

            CONSTRAINT fk_rewards_user
                FOREIGN KEY (user_id) REFERENCES cleanup.users(id),
            CONSTRAINT ck_rewards_points_used CHECK (points_used > 0),
            CONSTRAINT ck_rewards_status
                CHECK (status IN ('PENDING', 'APPROVED', 'REJECTED'))
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_cleanup_rewards_user_id
        ON cleanup.rewards(user_id)
    """)

    # ============================================
    # cleanup.reward_pins
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS cleanup.reward_pins (
            id BIGSERIAL PRIMARY KEY,
            reward_id BIGINT NOT NULL,
            pin_number VARCHAR(19) NOT NULL,
            issued_at TIMESTAMPTZ NOT NULL,
            expires_at TIMESTAMPTZ NOT NULL,
            is_used BOOLEAN NOT NULL DEFAULT FALSE,
            used_at TIMESTAMPTZ,

            CONSTRAINT fk_reward_pins_reward
                FOREIGN KEY (reward_id) REFERENCES cleanup.rewards(id) ON DELETE CASCADE,
            CONSTRAINT uq_reward_pins_reward_id UNIQUE (reward_id),
            CONSTRAINT uq_reward_pins_pin_number UNIQUE (pin_number)
        )
    """)


def downgrade() -> None:
    """Drop cleanup schema.

    주의: 모든 데이터가 삭제됩니다!
    """
    op.execute("DROP TABLE IF EXISTS cleanup.reward_pins CASCADE")
    op.execute("DROP TABLE IF EXISTS cleanup.rewards CASCADE")
    op.execute("DROP TABLE IF EXISTS cleanup.point_histories CASCADE")
    op.execute("DROP TABLE IF EXISTS cleanup.users CASCADE")
    op.execute("DROP TABLE IF EXISTS cleanup.photos CASCADE")
    op.execute("DROP TABLE IF EXISTS cleanup.markers CASCADE")
    op.execute("DROP SCHEMA IF EXISTS cleanup CASCADE")
