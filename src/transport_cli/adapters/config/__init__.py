"""Configuration adapters."""

from transport_cli.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
