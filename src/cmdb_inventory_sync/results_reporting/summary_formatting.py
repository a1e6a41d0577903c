"""Operator-facing report lines."""

from __future__ import annotations

from typing import Protocol

from cmdb_inventory_sync.reconciliation.reconciliation_outcomes import (
    OutcomeKind,
    ReconciliationOutcome,
    SyncStats,
)


class ProgressReporter(Protocol):  # pylint: disable=too-few-public-methods
    """Receives report lines as the run progresses."""

    def __call__(self, line: str, *, is_error: bool = False) -> None: ...


def discard_progress(line: str, *, is_error: bool = False) -> None:
    """Reporter that drops every line."""


def format_discovery_line(entity_count: int) -> str:
    noun = "entity" if entity_count == 1 else "entities"
    return f"Importing {entity_count} {noun} in ServiceNow:"


def format_status_line(outcome: ReconciliationOutcome) -> str:
    """Render the numbered status line of one reconciled entity."""
    if outcome.kind in (OutcomeKind.IMPORTED, OutcomeKind.UPDATED):
        return f"\t{outcome.sequence}) {outcome.name} {outcome.kind.value};"
    return f"\t{outcome.sequence}) Cannot import {outcome.name}: {outcome.reason};"


def format_elapsed(elapsed_seconds: float) -> str:
    """Format a duration as zero-padded `mm:ss`."""
    total_seconds = max(0, int(elapsed_seconds))
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


def format_finished_line(elapsed_seconds: float) -> str:
    return f"Operation finished in {format_elapsed(elapsed_seconds)}:"


def format_tally_line(stats: SyncStats) -> str:
    return (
        f"\t{stats.imported} imported, {stats.updated} updated, "
        f"{stats.total_errors} errors "
        f"({stats.duplicated} duplicated, {stats.errors} others)."
    )
