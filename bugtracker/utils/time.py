"""
time.py - time utilities
Single responsibility: common time helpers.
"""
from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(dt: datetime) -> str:
    """UTC ISO 8601 with millisecond precision, e.g. 2024-05-01T10:00:00.000Z."""
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def to_millis(dt: datetime) -> int:
    return int(dt.timestamp() * 1000)


def now_iso() -> str:
    return to_iso(utc_now())
