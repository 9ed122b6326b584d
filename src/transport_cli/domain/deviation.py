"""Detection of realtime deviations from the published schedule."""

from transport_cli.domain.models.stop import Stop, StopRole


def has_deviation(stop: Stop, role: StopRole) -> bool:
    """Check whether the realtime prognosis of a stop differs from its schedule.

    Values are compared as strings. Two timestamps for the same instant that
    are serialized differently count as a deviation.

    Args:
        stop: The stop to inspect.
        role: Which of the stop's times is relevant.

    Returns:
        True if the role's time or the platform has changed.
    """
    prognosis = stop.prognosis
    if prognosis is None:
        return False

    if role is StopRole.DEPARTURE and prognosis.departure and prognosis.departure != stop.departure:
        return True
    if role is StopRole.ARRIVAL and prognosis.arrival and prognosis.arrival != stop.arrival:
        return True
    return bool(prognosis.platform) and prognosis.platform != stop.platform
