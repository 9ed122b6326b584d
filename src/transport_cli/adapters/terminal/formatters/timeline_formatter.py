"""Formatter for a connection as a top-to-bottom timeline."""

from transport_cli.adapters.terminal.formatters.duration_formatter import format_duration
from transport_cli.adapters.terminal.formatters.journey_formatter import format_leg
from transport_cli.adapters.terminal.formatters.stop_formatter import format_stop
from transport_cli.domain.contracts.connection_formatter import ConnectionFormatterProtocol
from transport_cli.domain.models import Connection, StopRole, WalkLeg

LEG_INDENT = "    "
SEPARATOR = "-" * 32


def format_timeline(connection: Connection) -> list[str]:
    """Format the stops and legs of a connection, one per line.

    A connection with N sections yields 2N+1 lines. A connection without
    sections is shown as a walk from its origin to its destination.
    """
    if not connection.sections:
        return [
            format_stop(connection.origin, StopRole.DEPARTURE),
            LEG_INDENT + format_leg(WalkLeg()),
            format_stop(connection.destination, StopRole.ARRIVAL),
        ]

    lines = [format_stop(connection.sections[0].departure, StopRole.DEPARTURE)]
    for section in connection.sections:
        lines.append(LEG_INDENT + format_leg(section.leg))
        lines.append(format_stop(section.arrival, StopRole.ARRIVAL))
    return lines


class TimelineFormatter(ConnectionFormatterProtocol):
    """Formats each connection as a header, its timeline and a separator."""

    def format_connection(self, index: int, connection: Connection) -> list[str]:
        """Format one connection block."""
        return [
            "",
            f"Connection {index}: Overall Duration: {format_duration(connection.duration)}",
            *format_timeline(connection),
            SEPARATOR,
        ]
