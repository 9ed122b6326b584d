"""Text formatters for terminal output."""

from transport_cli.adapters.terminal.formatters.duration_formatter import format_duration
from transport_cli.adapters.terminal.formatters.journey_formatter import format_leg, leg_name
from transport_cli.adapters.terminal.formatters.stop_formatter import format_stop
from transport_cli.adapters.terminal.formatters.summary_formatter import (
    SummaryFormatter,
    format_summary,
)
from transport_cli.adapters.terminal.formatters.time_formatter import format_time
from transport_cli.adapters.terminal.formatters.timeline_formatter import (
    TimelineFormatter,
    format_timeline,
)

__all__ = [
    "SummaryFormatter",
    "TimelineFormatter",
    "format_duration",
    "format_leg",
    "format_stop",
    "format_summary",
    "format_time",
    "format_timeline",
    "leg_name",
]
