"""Contracts (protocols) implemented by adapters."""

from transport_cli.domain.contracts.connection_formatter import ConnectionFormatterProtocol

__all__ = ["ConnectionFormatterProtocol"]
