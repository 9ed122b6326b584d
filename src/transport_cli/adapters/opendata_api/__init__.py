"""transport.opendata.ch API adapters."""

from transport_cli.adapters.opendata_api.connection_parser import ConnectionParser
from transport_cli.adapters.opendata_api.opendata_connection_repository import (
    OpendataConnectionRepository,
)

__all__ = ["ConnectionParser", "OpendataConnectionRepository"]
