"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass

from cmdb_inventory_sync.reconciliation.reconciliation_outcomes import (
    ReconciliationOutcome,
    SyncStats,
)


@dataclass(frozen=True)
class SyncRequest:
    """Input contract for executing one synchronization run."""

    config_path: str


@dataclass(frozen=True)
class SyncSummary:
    """Output contract for one completed synchronization run."""

    discovered: int
    imported: int
    updated: int
    duplicated: int
    errors: int
    elapsed_seconds: float
    outcomes: tuple[ReconciliationOutcome, ...] = ()

    @staticmethod
    def from_stats(
        stats: SyncStats,
        *,
        discovered: int,
        elapsed_seconds: float,
        outcomes: tuple[ReconciliationOutcome, ...] = (),
    ) -> SyncSummary:
        return SyncSummary(
            discovered=discovered,
            imported=stats.imported,
            updated=stats.updated,
            duplicated=stats.duplicated,
            errors=stats.errors,
            elapsed_seconds=elapsed_seconds,
            outcomes=outcomes,
        )
