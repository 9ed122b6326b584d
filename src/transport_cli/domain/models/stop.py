"""Stop and prognosis domain models."""

from dataclasses import dataclass
from enum import Enum

from transport_cli.domain.models.station import Station


class StopRole(Enum):
    """Whether a stop is shown as the start or the end of a leg."""

    DEPARTURE = "departure"
    ARRIVAL = "arrival"


@dataclass(frozen=True)
class Prognosis:
    """Realtime forecast for a stop.

    Empty strings mean the API reported no deviation for that field.
    """

    platform: str = ""
    arrival: str = ""
    departure: str = ""
    capacity_1st: str = ""  # Not rendered
    capacity_2nd: str = ""  # Not rendered


@dataclass(frozen=True)
class Stop:
    """A single departure or arrival event at a station."""

    station: Station
    departure: str = ""  # ISO 8601, e.g. "2024-03-01T10:02:00+0100"
    arrival: str = ""
    platform: str = ""
    prognosis: Prognosis | None = None

    def scheduled_time(self, role: StopRole) -> str:
        """Return the scheduled time relevant for the given role."""
        if role is StopRole.DEPARTURE:
            return self.departure
        return self.arrival
