"""Time helpers for timeline generation."""

from __future__ import annotations

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo


def require_aware(now: datetime) -> datetime:
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")
    return now


def sample_time(now: datetime, index: int, sample_count: int, interval: timedelta) -> datetime:
    """Timestamp of sample ``index`` on a path whose last sample is ``now``."""
    return now - (sample_count - 1 - index) * interval


def sample_times(now: datetime, sample_count: int, interval: timedelta) -> list[datetime]:
    require_aware(now)
    return [sample_time(now, index, sample_count, interval) for index in range(sample_count)]


def window_start(now: datetime, window_days: int) -> datetime:
    require_aware(now)
    return now - timedelta(days=window_days)


def day_label(timestamp: datetime, timezone: str) -> str:
    local = timestamp.astimezone(ZoneInfo(timezone))
    return f"{local.strftime('%b')} {local.day}"


def format_trade_time(timestamp: datetime) -> str:
    return timestamp.astimezone(ZoneInfo("UTC")).strftime("%Y-%m-%d %H:%M:%S")
