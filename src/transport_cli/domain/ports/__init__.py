"""Ports (interfaces) for the ports-and-adapters architecture."""

from transport_cli.domain.ports.connection_repository import ConnectionRepository
from transport_cli.domain.ports.display_adapter import DisplayAdapter

__all__ = [
    "ConnectionRepository",
    "DisplayAdapter",
]
