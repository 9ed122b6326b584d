"""Formatter for the leg between two stops."""

from typing import assert_never

from transport_cli.domain.models import Leg, RideLeg, WalkLeg

WALK_NAME = "Walk"


def leg_name(leg: Leg) -> str:
    """Short name of a leg, e.g. "S 14" or "Walk"."""
    if isinstance(leg, WalkLeg):
        return WALK_NAME
    if isinstance(leg, RideLeg):
        # Only category and line number, the journey id is left out
        return f"{leg.category} {leg.number}"
    assert_never(leg)


def format_leg(leg: Leg) -> str:
    """Format a leg as an arrow label, e.g. "──( IR 36 )──▶"."""
    return f"──( {leg_name(leg)} )──▶"
