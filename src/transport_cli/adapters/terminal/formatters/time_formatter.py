"""Formatter for API timestamps."""

from datetime import datetime

# %z accepts "+01:00", "+0100" and "Z"
_TIMESTAMP_FORMATS = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
)


def _parse_timestamp(value: str) -> datetime | None:
    """Parse a timestamp with seconds and a timezone offset."""
    for fmt in _TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def format_time(value: str) -> str:
    """Format a timestamp as 24-hour HH:MM in its own offset.

    Unparseable values are returned unchanged.
    """
    if not value:
        return ""

    parsed = _parse_timestamp(value)
    if parsed is None:
        return value
    return parsed.strftime("%H:%M")
