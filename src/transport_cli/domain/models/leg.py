"""Leg variants: a ride on a vehicle or a walking transfer."""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class RideLeg:
    """A section travelled on a public transport vehicle."""

    category: str  # e.g. "S", "IR", "B"
    number: str  # e.g. "14", "36"
    operator: str = ""  # Not used for display
    to: str = ""  # Terminal destination of the vehicle


@dataclass(frozen=True)
class WalkLeg:
    """A walking transfer between two stops."""


Leg: TypeAlias = RideLeg | WalkLeg
