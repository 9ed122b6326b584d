"""Parser for transport.opendata.ch connection responses."""

import json
import logging
from typing import Any

from transport_cli.domain.errors import DecodeError
from transport_cli.domain.models import (
    Connection,
    Leg,
    Prognosis,
    RideLeg,
    Section,
    Station,
    Stop,
    WalkLeg,
)

logger = logging.getLogger(__name__)


class ConnectionParser:
    """Parses /connections responses into Connection objects.

    Missing or null fields become empty values. Only bodies that are not JSON,
    or whose nesting does not match the API's structure, are rejected.
    """

    @staticmethod
    def parse_connections(body: bytes | str) -> list[Connection]:
        """Parse a connections response body.

        Args:
            body: Raw response body.

        Returns:
            Connections in the order returned by the API.

        Raises:
            DecodeError: If the body is not valid JSON or has the wrong shape.
        """
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
            raise DecodeError(f"Error parsing JSON: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError(
                f"Error parsing JSON: expected an object, got {type(data).__name__}"
            )

        raw_connections = ConnectionParser._as_list(data.get("connections"), "connections")
        connections = [ConnectionParser._parse_connection(conn) for conn in raw_connections]
        logger.debug(f"Parsed {len(connections)} connection(s)")
        return connections

    @staticmethod
    def _parse_connection(raw: Any) -> Connection:
        """Parse a single connection."""
        conn = ConnectionParser._as_dict(raw, "connection")
        sections = ConnectionParser._as_list(conn.get("sections"), "sections")
        return Connection(
            origin=ConnectionParser._parse_stop(conn.get("from")),
            destination=ConnectionParser._parse_stop(conn.get("to")),
            duration=ConnectionParser._as_str(conn.get("duration"), "duration"),
            sections=tuple(ConnectionParser._parse_section(section) for section in sections),
        )

    @staticmethod
    def _parse_section(raw: Any) -> Section:
        """Parse a section. A missing journey means a walking transfer."""
        section = ConnectionParser._as_dict(raw, "section")
        return Section(
            departure=ConnectionParser._parse_stop(section.get("departure")),
            arrival=ConnectionParser._parse_stop(section.get("arrival")),
            leg=ConnectionParser._parse_leg(section.get("journey")),
        )

    @staticmethod
    def _parse_leg(raw: Any) -> Leg:
        """Parse the journey of a section into a ride or walk leg."""
        if raw is None:
            return WalkLeg()

        journey = ConnectionParser._as_dict(raw, "journey")
        return RideLeg(
            category=ConnectionParser._as_str(journey.get("category"), "journey.category"),
            number=ConnectionParser._as_str(journey.get("number"), "journey.number"),
            operator=ConnectionParser._as_str(journey.get("operator"), "journey.operator"),
            to=ConnectionParser._as_str(journey.get("to"), "journey.to"),
        )

    @staticmethod
    def _parse_stop(raw: Any) -> Stop:
        """Parse a checkpoint (stop) object."""
        stop = ConnectionParser._as_dict(raw, "stop")
        station = ConnectionParser._as_dict(stop.get("station"), "station")
        return Stop(
            station=Station(name=ConnectionParser._as_str(station.get("name"), "station.name")),
            departure=ConnectionParser._as_str(stop.get("departure"), "departure"),
            arrival=ConnectionParser._as_str(stop.get("arrival"), "arrival"),
            platform=ConnectionParser._as_str(stop.get("platform"), "platform"),
            prognosis=ConnectionParser._parse_prognosis(stop.get("prognosis")),
        )

    @staticmethod
    def _parse_prognosis(raw: Any) -> Prognosis | None:
        """Parse the realtime prognosis of a stop, if any."""
        if raw is None:
            return None

        prognosis = ConnectionParser._as_dict(raw, "prognosis")
        return Prognosis(
            platform=ConnectionParser._as_str(prognosis.get("platform"), "prognosis.platform"),
            arrival=ConnectionParser._as_str(prognosis.get("arrival"), "prognosis.arrival"),
            departure=ConnectionParser._as_str(prognosis.get("departure"), "prognosis.departure"),
            capacity_1st=ConnectionParser._as_str(
                prognosis.get("capacity1st"), "prognosis.capacity1st"
            ),
            capacity_2nd=ConnectionParser._as_str(
                prognosis.get("capacity2nd"), "prognosis.capacity2nd"
            ),
        )

    @staticmethod
    def _as_dict(value: Any, field: str) -> dict[str, Any]:
        """Return value as a dict, treating null as empty."""
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise DecodeError(f"Error parsing JSON: '{field}' must be an object")
        return value

    @staticmethod
    def _as_list(value: Any, field: str) -> list[Any]:
        """Return value as a list, treating null as empty."""
        if value is None:
            return []
        if not isinstance(value, list):
            raise DecodeError(f"Error parsing JSON: '{field}' must be an array")
        return value

    @staticmethod
    def _as_str(value: Any, field: str) -> str:
        """Return value as a string, treating null as empty.

        Numbers are accepted because the API sometimes sends platforms,
        line numbers and capacities as integers.
        """
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        raise DecodeError(f"Error parsing JSON: '{field}' must be a string")
