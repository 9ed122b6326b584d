"""Connection repository adapter using the transport.opendata.ch API.

API Documentation: https://transport.opendata.ch/docs.html
"""

import logging
from typing import TYPE_CHECKING

from transport_cli.adapters.opendata_api.connection_parser import ConnectionParser
from transport_cli.adapters.opendata_api.http_client import OpendataHttpClient
from transport_cli.domain.models import Connection
from transport_cli.domain.ports.connection_repository import ConnectionRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from transport_cli.adapters.config import AppConfig


class OpendataConnectionRepository(ConnectionRepository):
    """Adapter for the connection repository using transport.opendata.ch."""

    def __init__(self, session: "ClientSession", config: "AppConfig") -> None:
        """Initialize with an aiohttp session and application configuration.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            config: Configuration providing URL, timeout and request logging.
        """
        self._http_client = OpendataHttpClient(
            session=session,
            connections_url=config.connections_url,
            timeout_seconds=config.api_timeout,
            log_requests=config.log_requests,
        )

    async def get_connections(
        self,
        origin: str,
        destination: str,
        limit: int | None = None,
    ) -> list[Connection]:
        """Get connections between two stops.

        Raises:
            TransportError: If the request fails.
            DecodeError: If the response cannot be decoded.
        """
        body = await self._http_client.fetch_connections(origin, destination, limit=limit)
        connections = ConnectionParser.parse_connections(body)
        if not connections:
            logger.debug(f"No connections returned for {origin} -> {destination}")
        return connections
