"""Domain layer - core models, ports and errors."""

from transport_cli.domain.models import (
    Connection,
    ConnectionQuery,
    Section,
    Station,
    Stop,
)
from transport_cli.domain.ports import (
    ConnectionRepository,
    DisplayAdapter,
)

__all__ = [
    "Connection",
    "ConnectionQuery",
    "ConnectionRepository",
    "DisplayAdapter",
    "Section",
    "Station",
    "Stop",
]
