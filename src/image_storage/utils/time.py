"""
Time-related utilities for the storage adapters.

All timestamps handed back to callers are timezone-aware UTC datetimes.
"""

from datetime import datetime, timezone


def to_utc(value: datetime) -> datetime:
    """Normalize a datetime to UTC.

    Naive values are assumed to already be in UTC, which is what S3
    reports for ``LastModified``.

    Example:
        2024-01-15T10:42:31+02:00 -> 2024-01-15T08:42:31+00:00
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
