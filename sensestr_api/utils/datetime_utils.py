"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling for every persisted timestamp.
All timestamps are timezone-aware UTC with millisecond precision, which is
what a BSON Date can hold, so a value read back from MongoDB compares equal
to the value that was written.

Functions:
- utc_now(): Current UTC time truncated to milliseconds
- ensure_utc(): Normalize naive/aware datetimes to aware UTC
- next_timestamp(): A timestamp strictly after a previous one
- to_iso(): Convert datetime object to ISO 8601 string
"""
from datetime import datetime, timedelta, timezone as dt_timezone
from typing import Optional

_ONE_MILLISECOND = timedelta(milliseconds=1)


def truncate_to_millis(dt: datetime) -> datetime:
    return dt.replace(microsecond=(dt.microsecond // 1000) * 1000)


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return truncate_to_millis(datetime.now(dt_timezone.utc))


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def next_timestamp(previous: Optional[datetime]) -> datetime:
    """
    Get a UTC timestamp strictly later than previous.

    Two mutations within the same millisecond would otherwise share an
    updatedDate; in that case the previous value is advanced by 1 ms.
    """
    current = utc_now()
    previous = ensure_utc(previous)
    if previous is not None and current <= previous:
        return truncate_to_millis(previous) + _ONE_MILLISECOND
    return current


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime to ISO 8601 string ('Z' suffix for UTC).

    Returns:
        ISO string or None if dt is None
    """
    dt = ensure_utc(dt)
    if dt is None:
        return None
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
