"""Formatter for a single stop of a timeline."""

from transport_cli.adapters.terminal.formatters.time_formatter import format_time
from transport_cli.domain.deviation import has_deviation
from transport_cli.domain.models import Stop, StopRole

WARNING_MARKER = " ⚠️"


def deviation_marker(stop: Stop, role: StopRole) -> str:
    """Return the warning marker if the stop deviates from its schedule."""
    return WARNING_MARKER if has_deviation(stop, role) else ""


def format_stop(stop: Stop, role: StopRole) -> str:
    """Format a stop as "[ Station (HH:MM | Plat 7) ]" with an optional warning."""
    time = format_time(stop.scheduled_time(role))
    return (
        f"[ {stop.station.name} ({time} | Plat {stop.platform}"
        f"{deviation_marker(stop, role)}) ]"
    )
