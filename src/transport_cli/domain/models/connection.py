"""Connection and section domain models."""

from dataclasses import dataclass, field

from transport_cli.domain.models.leg import Leg, WalkLeg
from transport_cli.domain.models.stop import Stop


@dataclass(frozen=True)
class Section:
    """One leg of a connection."""

    departure: Stop
    arrival: Stop
    leg: Leg = field(default_factory=WalkLeg)


@dataclass(frozen=True)
class Connection:
    """One end-to-end journey option between two stops."""

    origin: Stop
    destination: Stop
    duration: str  # e.g. "00d00:55:00"
    sections: tuple[Section, ...] = ()
