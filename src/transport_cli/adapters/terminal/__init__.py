"""Terminal output adapters."""

from transport_cli.adapters.terminal.terminal_display_adapter import TerminalDisplayAdapter

__all__ = ["TerminalDisplayAdapter"]
