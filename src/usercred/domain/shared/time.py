"""Time utilities for the domain layer."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current UTC time as a naive datetime.

    The store keeps DATETIME columns without zone information and fills its
    defaults with CURRENT_TIMESTAMP, so values set in memory use the same form.
    """
    return datetime.now(tz=timezone.utc).replace(tzinfo=None)


def ensure_naive_utc(dt: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are returned as-is."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)
