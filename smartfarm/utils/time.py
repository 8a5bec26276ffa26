"""Utility functions for time handling.

All timestamps are UTC and timezone-aware. Naive values coming from the
backend API (or plain ``date`` objects for crop calendars) are interpreted
as UTC.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any

SECONDS_PER_DAY = 86_400


def utc_now() -> datetime:
    """Return current UTC time as an aware datetime."""
    return datetime.now(timezone.utc)


def coerce_datetime(value: Any) -> datetime | None:
    """
    Coerce value to datetime, returning None on failure.

    Args:
        value: ISO string, datetime or date to coerce

    Returns:
        Datetime in timezone.utc or None if invalid
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw.replace("Z", "+00:00")
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    else:
        parsed = parsed.replace(tzinfo=timezone.utc)

    return parsed


def days_between(start: datetime, end: datetime) -> float:
    """Fractional number of days from ``start`` to ``end`` (negative if end is earlier)."""
    return (end - start).total_seconds() / SECONDS_PER_DAY
