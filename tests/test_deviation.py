"""Tests for deviation detection."""

from collections.abc import Callable

from transport_cli.domain.deviation import has_deviation
from transport_cli.domain.models import Prognosis, Stop, StopRole


def test_no_prognosis_never_warns(make_stop: Callable[..., Stop]) -> None:
    """Given a stop without prognosis, when checking, then no deviation is reported."""
    stop = make_stop(departure="2024-03-01T10:02:00+0100", platform="7")

    assert has_deviation(stop, StopRole.DEPARTURE) is False
    assert has_deviation(stop, StopRole.ARRIVAL) is False


def test_equal_prognosis_departure_does_not_warn(make_stop: Callable[..., Stop]) -> None:
    """Given a prognosis departure equal to the schedule, when checking, then no deviation."""
    stop = make_stop(
        departure="2024-03-01T10:02:00+0100",
        prognosis=Prognosis(departure="2024-03-01T10:02:00+0100"),
    )

    assert has_deviation(stop, StopRole.DEPARTURE) is False


def test_delayed_departure_warns(make_stop: Callable[..., Stop]) -> None:
    """Given a later prognosis departure, when checking as departure, then warns."""
    stop = make_stop(
        departure="2024-03-01T10:02:00+0100",
        prognosis=Prognosis(departure="2024-03-01T10:05:00+0100"),
    )

    assert has_deviation(stop, StopRole.DEPARTURE) is True


def test_formatting_only_difference_warns(make_stop: Callable[..., Stop]) -> None:
    """Given the same instant serialized differently, when checking, then warns."""
    stop = make_stop(
        departure="2024-03-01T10:02:00+0100",
        prognosis=Prognosis(departure="2024-03-01T10:02:00+01:00"),
    )

    assert has_deviation(stop, StopRole.DEPARTURE) is True


def test_departure_change_ignored_for_arrival_role(make_stop: Callable[..., Stop]) -> None:
    """Given only a departure change, when checking as arrival, then no deviation."""
    stop = make_stop(
        departure="2024-03-01T10:02:00+0100",
        arrival="2024-03-01T10:00:00+0100",
        prognosis=Prognosis(departure="2024-03-01T10:05:00+0100"),
    )

    assert has_deviation(stop, StopRole.ARRIVAL) is False


def test_delayed_arrival_warns(make_stop: Callable[..., Stop]) -> None:
    """Given a later prognosis arrival, when checking as arrival, then warns."""
    stop = make_stop(
        arrival="2024-03-01T11:00:00+0100",
        prognosis=Prognosis(arrival="2024-03-01T11:03:00+0100"),
    )

    assert has_deviation(stop, StopRole.ARRIVAL) is True
    assert has_deviation(stop, StopRole.DEPARTURE) is False


def test_platform_change_warns_for_both_roles(make_stop: Callable[..., Stop]) -> None:
    """Given a changed platform, when checking either role, then warns."""
    stop = make_stop(platform="7", prognosis=Prognosis(platform="9"))

    assert has_deviation(stop, StopRole.DEPARTURE) is True
    assert has_deviation(stop, StopRole.ARRIVAL) is True


def test_empty_prognosis_fields_do_not_warn(make_stop: Callable[..., Stop]) -> None:
    """Given a prognosis with only empty fields, when checking, then no deviation."""
    stop = make_stop(
        departure="2024-03-01T10:02:00+0100",
        arrival="2024-03-01T10:00:00+0100",
        platform="7",
        prognosis=Prognosis(),
    )

    assert has_deviation(stop, StopRole.DEPARTURE) is False
    assert has_deviation(stop, StopRole.ARRIVAL) is False
