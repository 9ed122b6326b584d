"""Application services (use cases) for connection lookup."""

from transport_cli.application.services.connection_query_service import ConnectionQueryService

__all__ = ["ConnectionQueryService"]
