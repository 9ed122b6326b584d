"""Adapters layer - external system integrations."""

from transport_cli.adapters.config import AppConfig
from transport_cli.adapters.opendata_api import OpendataConnectionRepository
from transport_cli.adapters.terminal import TerminalDisplayAdapter

__all__ = [
    "AppConfig",
    "OpendataConnectionRepository",
    "TerminalDisplayAdapter",
]
