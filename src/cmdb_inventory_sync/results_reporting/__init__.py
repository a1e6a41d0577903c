"""Results reporting exports."""

from .summary_formatting import (
    ProgressReporter,
    discard_progress,
    format_discovery_line,
    format_elapsed,
    format_finished_line,
    format_status_line,
    format_tally_line,
)

__all__ = [
    "ProgressReporter",
    "discard_progress",
    "format_discovery_line",
    "format_elapsed",
    "format_finished_line",
    "format_status_line",
    "format_tally_line",
]
