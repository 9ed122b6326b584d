"""Display adapter writing connections to a terminal."""

import sys
from typing import TextIO

from transport_cli.domain.contracts.connection_formatter import ConnectionFormatterProtocol
from transport_cli.domain.models import Connection
from transport_cli.domain.ports.display_adapter import DisplayAdapter

BANNER = """
  ==================================
   🚆  Welcome to Transport CLI 🚏
  ==================================
"""

NO_CONNECTIONS_MESSAGE = "No connections found."


class TerminalDisplayAdapter(DisplayAdapter):
    """Writes formatted connections to a text stream."""

    def __init__(
        self, formatter: ConnectionFormatterProtocol, stream: TextIO | None = None
    ) -> None:
        """Initialize the adapter.

        Args:
            formatter: Formatter producing the lines for each connection.
            stream: Output stream, defaults to standard output.
        """
        self._formatter = formatter
        self._stream = stream if stream is not None else sys.stdout

    def render(self, connections: list[Connection]) -> str:
        """Render connections to text without writing it."""
        if not connections:
            return NO_CONNECTIONS_MESSAGE + "\n"

        lines: list[str] = []
        for index, connection in enumerate(connections, start=1):
            lines.extend(self._formatter.format_connection(index, connection))
        return "\n".join(lines) + "\n"

    def display_connections(self, connections: list[Connection]) -> None:
        """Write connections to the output stream."""
        self._stream.write(self.render(connections))
        self._stream.flush()

    def display_banner(self) -> None:
        """Write the welcome banner to the output stream."""
        self._stream.write(BANNER)
        self._stream.flush()
