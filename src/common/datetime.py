"""Datetime utilities."""

from datetime import datetime, timezone

# Epoch values above this are milliseconds (JavaScript-style timestamps)
EPOCH_MILLIS_THRESHOLD = 1e12


def parse_epoch(value) -> datetime | None:
    """Convert an epoch timestamp in seconds or milliseconds to a UTC datetime.

    Returns None for missing or non-numeric values.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if number > EPOCH_MILLIS_THRESHOLD:
        number = number / 1000
    try:
        return datetime.fromtimestamp(number, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None
