"""Command-line client for the transport.opendata.ch connections API."""

__version__ = "0.1.0"
