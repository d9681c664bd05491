from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(timezone.utc)


def to_log_timestamp(value: datetime) -> str:
    """Format as ISO-8601 with milliseconds and a trailing Z, e.g. 2025-02-01T09:30:00.000Z."""
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
