"""Connection repository port."""

from typing import Protocol

from transport_cli.domain.models.connection import Connection


class ConnectionRepository(Protocol):
    """Port for retrieving connections between two stops."""

    async def get_connections(
        self,
        origin: str,
        destination: str,
        limit: int | None = None,
    ) -> list[Connection]:
        """Get connections from origin to destination."""
        ...
