"""Formatter for API durations such as "00d01:05:00"."""

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(value: str) -> int | None:
    """Parse a plain decimal integer."""
    if not _INTEGER.fullmatch(value):
        return None
    return int(value)


def _pluralize(value: int, unit: str) -> str:
    """Format a count with its unit, singular only for exactly one."""
    return f"{value} {unit}" if value == 1 else f"{value} {unit}s"


def format_duration(value: str) -> str:
    """Format a duration as a human readable phrase.

    Seconds are only shown for durations below one minute. Malformed input is
    returned unchanged.

    Examples:
        "00d00:55:00" -> "55 minutes"
        "01d02:00:00" -> "1 day 2 hours"
        "00d00:00:00" -> "0 minutes"
    """
    days_part, separator, time_part = value.partition("d")
    if not separator:
        return value

    time_parts = time_part.split(":")
    if len(time_parts) != 3:
        return value

    parsed = [_parse_int(part) for part in (days_part, *time_parts)]
    numbers = [number for number in parsed if number is not None]
    if len(numbers) != len(parsed):
        return value
    days, hours, minutes, seconds = numbers

    parts = []
    if days > 0:
        parts.append(_pluralize(days, "day"))
    if hours > 0:
        parts.append(_pluralize(hours, "hour"))
    if minutes > 0:
        parts.append(_pluralize(minutes, "minute"))
    if seconds > 0 and days == 0 and hours == 0 and minutes == 0:
        parts.append(_pluralize(seconds, "second"))

    if not parts:
        return "0 minutes"
    return " ".join(parts)
