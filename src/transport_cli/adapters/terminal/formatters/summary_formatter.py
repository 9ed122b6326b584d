"""Formatter for a connection as a single summary line."""

from transport_cli.adapters.terminal.formatters.duration_formatter import format_duration
from transport_cli.adapters.terminal.formatters.journey_formatter import leg_name
from transport_cli.adapters.terminal.formatters.stop_formatter import WARNING_MARKER
from transport_cli.adapters.terminal.formatters.time_formatter import format_time
from transport_cli.domain.contracts.connection_formatter import ConnectionFormatterProtocol
from transport_cli.domain.deviation import has_deviation
from transport_cli.domain.models import Connection, StopRole


def format_summary(connection: Connection) -> str:
    """Format a connection as "Bern 10:02 → Zürich HB 10:58 (56 minutes) via IC 1"."""
    origin = connection.origin
    destination = connection.destination
    summary = (
        f"{origin.station.name} {format_time(origin.departure)} → "
        f"{destination.station.name} {format_time(destination.arrival)} "
        f"({format_duration(connection.duration)})"
    )
    if connection.sections:
        summary += " via " + ", ".join(leg_name(section.leg) for section in connection.sections)
    if has_deviation(origin, StopRole.DEPARTURE) or has_deviation(destination, StopRole.ARRIVAL):
        summary += WARNING_MARKER
    return summary


class SummaryFormatter(ConnectionFormatterProtocol):
    """Formats each connection as one numbered line."""

    def format_connection(self, index: int, connection: Connection) -> list[str]:
        """Format one connection line."""
        return [f"{index}. {format_summary(connection)}"]
