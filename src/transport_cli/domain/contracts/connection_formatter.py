"""Protocol for formatting connections as text."""

from typing import Protocol

from transport_cli.domain.models.connection import Connection


class ConnectionFormatterProtocol(Protocol):
    """Protocol for turning a connection into display lines."""

    def format_connection(self, index: int, connection: Connection) -> list[str]:
        """Format one connection.

        Args:
            index: 1-based position of the connection in the result list.
            connection: The connection to format.

        Returns:
            Lines of text, without trailing newlines.
        """
        ...
