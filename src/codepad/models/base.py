"""Shared column helpers."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time in UTC without tzinfo.

    ``created_at`` columns are TIMESTAMP WITHOUT TIME ZONE and hold UTC, and
    listing order depends on these values, so every writer uses this clock.
    """
    return datetime.now(UTC).replace(tzinfo=None)
