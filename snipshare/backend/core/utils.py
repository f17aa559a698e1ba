"""
Core Utilities.

Shared helpers used across the backend.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    Snippet timestamps are stored naive and interpreted as UTC.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
