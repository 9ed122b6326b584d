"""Shared fixtures for transport_cli tests."""

import json
from collections.abc import Callable
from typing import Any

import pytest

from transport_cli.domain.models import Prognosis, Station, Stop


@pytest.fixture
def make_stop() -> Callable[..., Stop]:
    """Factory for stops with sensible defaults."""

    def _make_stop(
        name: str = "Bern",
        departure: str = "",
        arrival: str = "",
        platform: str = "",
        prognosis: Prognosis | None = None,
    ) -> Stop:
        return Stop(
            station=Station(name=name),
            departure=departure,
            arrival=arrival,
            platform=platform,
            prognosis=prognosis,
        )

    return _make_stop


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    """A connections response shaped like transport.opendata.ch output.

    The first connection has a ride, a walking transfer and a second ride;
    the second connection has no sections.
    """
    bern = {
        "station": {"id": "8507000", "name": "Bern"},
        "arrival": None,
        "departure": "2024-03-01T10:02:00+0100",
        "platform": "7",
        "prognosis": {
            "platform": None,
            "arrival": None,
            "departure": "2024-03-01T10:04:00+0100",
            "capacity1st": 1,
            "capacity2nd": 2,
        },
    }
    olten_arrival = {
        "station": {"id": "8500218", "name": "Olten"},
        "arrival": "2024-03-01T10:28:00+0100",
        "departure": None,
        "platform": "8",
        "prognosis": {
            "platform": "9",
            "arrival": None,
            "departure": None,
            "capacity1st": None,
            "capacity2nd": None,
        },
    }
    olten_walk_end = {
        "station": {"id": "8500218", "name": "Olten, Bahnhof"},
        "arrival": "2024-03-01T10:33:00+0100",
        "departure": None,
        "platform": "",
        "prognosis": None,
    }
    olten_departure = {
        "station": {"id": "8500218", "name": "Olten, Bahnhof"},
        "arrival": None,
        "departure": "2024-03-01T10:35:00+0100",
        "platform": "B",
        "prognosis": None,
    }
    zurich = {
        "station": {"id": "8503000", "name": "Zürich HB"},
        "arrival": "2024-03-01T11:00:00+0100",
        "departure": None,
        "platform": "31",
        "prognosis": None,
    }
    return {
        "connections": [
            {
                "from": bern,
                "to": zurich,
                "duration": "00d00:58:00",
                "transfers": 1,
                "sections": [
                    {
                        "journey": {
                            "name": "IC 1",
                            "category": "IC",
                            "number": "1",
                            "operator": "SBB",
                            "to": "St. Gallen",
                        },
                        "walk": None,
                        "departure": bern,
                        "arrival": olten_arrival,
                    },
                    {
                        "journey": None,
                        "walk": {"duration": 300},
                        "departure": {**olten_arrival, "departure": "2024-03-01T10:28:00+0100"},
                        "arrival": olten_walk_end,
                    },
                    {
                        "journey": {
                            "name": "B 36",
                            "category": "B",
                            "number": 36,
                            "operator": "BOGG",
                            "to": "Zürich HB",
                        },
                        "walk": None,
                        "departure": olten_departure,
                        "arrival": zurich,
                    },
                ],
            },
            {
                "from": {
                    "station": {"name": "Bern"},
                    "departure": "2024-03-01T10:05:00+01:00",
                    "platform": "",
                },
                "to": {
                    "station": {"name": "Zürich HB"},
                    "arrival": "2024-03-01T11:00:00+01:00",
                    "platform": "",
                },
                "duration": "00d00:55:00",
                "sections": [],
            },
        ]
    }


@pytest.fixture
def sample_body(sample_payload: dict[str, Any]) -> bytes:
    """The sample payload encoded as a response body."""
    return json.dumps(sample_payload).encode("utf-8")
