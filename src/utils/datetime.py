"""DateTime utilities for the project."""

from datetime import datetime, timezone, tzinfo
from typing import Optional

INVALID_DATE: str = "Invalid Date"


def parse_iso_timestamp(ts_iso: str) -> datetime:
    """Parse ISO timestamp string to datetime object."""
    return datetime.fromisoformat(ts_iso.strip().replace('Z', '+00:00'))


def to_local_display(ts_iso: str, tz: Optional[tzinfo] = None) -> str:
    """Render an ISO timestamp in local time using the locale's date/time format.

    Naive timestamps are taken as UTC. ``tz`` overrides the local timezone,
    which keeps tests independent of the host clock settings.
    """
    try:
        dt = parse_iso_timestamp(ts_iso)
    except (AttributeError, TypeError, ValueError):
        return INVALID_DATE
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(tz).strftime("%c")
