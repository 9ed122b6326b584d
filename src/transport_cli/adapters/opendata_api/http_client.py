"""HTTP client for transport.opendata.ch requests.

API Documentation: https://transport.opendata.ch/docs.html
"""

import logging
from typing import TYPE_CHECKING

import aiohttp

from transport_cli.adapters.api_request_logger import log_api_request
from transport_cli.adapters.opendata_api.constants import (
    DEFAULT_HEADERS,
    ERROR_BODY_EXCERPT_LENGTH,
    OPENDATA_CONNECTIONS_URL,
)
from transport_cli.domain.errors import TransportError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class OpendataHttpClient:
    """HTTP client for the transport.opendata.ch connections endpoint."""

    def __init__(
        self,
        session: "ClientSession",
        connections_url: str = OPENDATA_CONNECTIONS_URL,
        timeout_seconds: float = 10,
        log_requests: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp ClientSession used for requests.
            connections_url: Full URL of the connections endpoint.
            timeout_seconds: Total timeout for one request.
            log_requests: Log each request before sending it.
        """
        self._session = session
        self._connections_url = connections_url
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._log_requests = log_requests

    @staticmethod
    def _build_params(origin: str, destination: str, limit: int | None) -> dict[str, str]:
        """Build query parameters. aiohttp takes care of URL encoding."""
        params = {"from": origin, "to": destination}
        if limit is not None:
            params["limit"] = str(limit)
        return params

    @staticmethod
    async def _raise_for_status(response: "ClientResponse", url: str) -> None:
        """Raise TransportError for non-2xx responses."""
        if 200 <= response.status < 300:
            return

        error_text = await response.text(errors="replace")
        excerpt = error_text[:ERROR_BODY_EXCERPT_LENGTH] if error_text else "(empty response body)"
        logger.error(f"API returned status {response.status} for {url}: {excerpt}")
        raise TransportError(
            f"Received status code {response.status} from {url}",
            status_code=response.status,
        )

    async def fetch_connections(
        self, origin: str, destination: str, limit: int | None = None
    ) -> bytes:
        """Fetch the raw connections response body.

        Args:
            origin: Name of the departure stop.
            destination: Name of the arrival stop.
            limit: Number of connections to request, or None for the API default.

        Returns:
            The undecoded response body.

        Raises:
            TransportError: On network failure, timeout or a non-2xx status.
        """
        params = self._build_params(origin, destination, limit)
        url = self._connections_url

        log_api_request(
            "GET", url, params=params, headers=DEFAULT_HEADERS, enabled=self._log_requests
        )

        try:
            async with self._session.get(
                url, params=params, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                await self._raise_for_status(response, url)
                body = await response.read()
        except TimeoutError as e:
            raise TransportError(f"Timed out fetching connections from {url}") from e
        except aiohttp.ClientError as e:
            raise TransportError(f"Error fetching connections: {e}") from e

        logger.debug(f"Received {len(body)} bytes from {url}")
        return body
