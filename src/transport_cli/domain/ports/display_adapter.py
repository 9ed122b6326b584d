"""Display adapter port."""

from abc import ABC, abstractmethod

from transport_cli.domain.models.connection import Connection


class DisplayAdapter(ABC):
    """Port for displaying connection information to users."""

    @abstractmethod
    def display_connections(self, connections: list[Connection]) -> None:
        """Display connections."""
        ...

    @abstractmethod
    def display_banner(self) -> None:
        """Display the welcome banner."""
        ...
