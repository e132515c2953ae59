"""Time Utilities for UTC management"""

from datetime import datetime, timezone


def get_utc_now() -> datetime:
    """
    Returns a naive UTC datetime.
    Matches the DB schema (TIMESTAMP WITHOUT TIME ZONE).
    Avoids 'datetime.utcnow()' deprecation warnings.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Normalise an aware datetime to naive UTC; naive values are assumed UTC already."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
