"""Use case for looking up connections between two stops."""

import logging
from typing import TYPE_CHECKING

from transport_cli.domain.errors import UsageError
from transport_cli.domain.models import Connection, ConnectionQuery

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from transport_cli.domain.ports import ConnectionRepository


class ConnectionQueryService:
    """Service for querying connections through a repository."""

    def __init__(self, connection_repository: "ConnectionRepository") -> None:
        """Initialize with a connection repository."""
        self._connection_repository = connection_repository

    @staticmethod
    def _validate(query: ConnectionQuery) -> ConnectionQuery:
        """Strip stop names and reject blank ones."""
        origin = query.origin.strip()
        destination = query.destination.strip()
        if not origin or not destination:
            raise UsageError("Both a departure and an arrival stop are required")
        return ConnectionQuery(origin=origin, destination=destination, limit=query.limit)

    async def find_connections(self, query: ConnectionQuery) -> list[Connection]:
        """Find connections for a query.

        Raises:
            UsageError: If a stop name is blank.
        """
        query = self._validate(query)
        connections = await self._connection_repository.get_connections(
            query.origin, query.destination, limit=query.limit
        )
        logger.info(
            f"Found {len(connections)} connection(s) from {query.origin} to {query.destination}"
        )
        return connections
