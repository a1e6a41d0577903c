"""Reconciliation outcome and stats tests."""

from __future__ import annotations

from cmdb_inventory_sync.reconciliation.reconciliation_outcomes import (
    OutcomeKind,
    ReconciliationOutcome,
    SyncStats,
)


def test_claim_sequence_starts_at_one_and_increments() -> None:
    stats = SyncStats()

    assert [stats.claim_sequence() for _ in range(3)] == [1, 2, 3]
    assert stats.next_sequence == 4


def test_record_routes_each_outcome_to_one_counter() -> None:
    stats = SyncStats()
    outcomes = [
        ReconciliationOutcome.imported(1, "e1", "a"),
        ReconciliationOutcome.updated(2, "e2", "b"),
        ReconciliationOutcome.duplicate(3, "e3", "c", "cmdb_ci_server"),
        ReconciliationOutcome.skipped_deleted(4, "e4", "e4"),
        ReconciliationOutcome.skipped_missing_field(5, "e5", "d", "serial_number"),
        ReconciliationOutcome.failed(6, "e6", "e6", RuntimeError("boom")),
    ]

    for outcome in outcomes:
        stats.record(outcome)

    assert (stats.imported, stats.updated, stats.duplicated, stats.errors) == (1, 1, 1, 3)
    assert stats.total_errors == 4


def test_outcome_factories_carry_operator_reasons() -> None:
    missing = ReconciliationOutcome.skipped_missing_field(1, "e1", "web", "serial_number")
    duplicate = ReconciliationOutcome.duplicate(2, "e2", "web", "cmdb_ci_server")
    failed = ReconciliationOutcome.failed(3, "e3", "web", RuntimeError("timeout"))

    assert missing.kind is OutcomeKind.SKIPPED_MISSING_REQUIRED_FIELD
    assert missing.reason == "serial number not found at the given path"
    assert duplicate.reason == 'entity with name "web" already exists in table "cmdb_ci_server"'
    assert failed.reason == "timeout"
    assert ReconciliationOutcome.skipped_deleted(4, "e4", "e4").reason == "entity deleted"


def test_is_written_only_for_imported_and_updated() -> None:
    assert ReconciliationOutcome.imported(1, "e", "n").is_written
    assert ReconciliationOutcome.updated(1, "e", "n").is_written
    assert not ReconciliationOutcome.skipped_deleted(1, "e", "n").is_written
