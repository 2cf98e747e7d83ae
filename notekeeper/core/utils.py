"""
Core Utilities.

Shared utility functions used across the service.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values in the application are timezone-naive
    and assumed to be UTC.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def format_timestamp(value: datetime) -> str:
    """
    Render a datetime in the wire format used by API responses.

    Naive values are taken as UTC; aware values are converted to UTC.
    Output looks like ``2024-05-01T09:30:00Z``.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")
