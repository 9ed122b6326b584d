"""Connection query domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConnectionQuery:
    """Request for connections between two named stops."""

    origin: str
    destination: str
    limit: int | None = None  # None lets the API pick its default
