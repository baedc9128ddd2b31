"""시각 유틸리티."""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """timezone-aware UTC 현재 시각."""
    return datetime.now(timezone.utc)


def add_years(moment: datetime, years: int) -> datetime:
    """달력 기준 N년 후 시각. 2월 29일은 2월 28일로 보정합니다."""
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        return moment.replace(year=moment.year + years, day=28)
