"""Day-bucket helpers. Every date in the service is a UTC ISO date string (YYYY-MM-DD)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def today_iso(clock: Clock = utc_now) -> str:
    return clock().date().isoformat()


def previous_day(day: str) -> str:
    return (date.fromisoformat(day) - timedelta(days=1)).isoformat()


def date_from_timestamp(published_at: str | None, fallback: str) -> str:
    """Take the calendar date off an ISO datetime, e.g. '2024-01-01T10:00:00Z' -> '2024-01-01'."""
    if not published_at or len(published_at) < 10:
        return fallback
    head = published_at[:10]
    try:
        date.fromisoformat(head)
    except ValueError:
        return fallback
    return head
