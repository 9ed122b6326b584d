"""Domain models for transport connections."""

from transport_cli.domain.models.connection import Connection, Section
from transport_cli.domain.models.connection_query import ConnectionQuery
from transport_cli.domain.models.leg import Leg, RideLeg, WalkLeg
from transport_cli.domain.models.station import Station
from transport_cli.domain.models.stop import Prognosis, Stop, StopRole

__all__ = [
    "Connection",
    "ConnectionQuery",
    "Leg",
    "Prognosis",
    "RideLeg",
    "Section",
    "Station",
    "Stop",
    "StopRole",
    "WalkLeg",
]
