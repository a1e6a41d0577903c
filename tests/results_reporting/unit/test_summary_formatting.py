"""Report line formatting tests."""

from __future__ import annotations

import pytest
from cmdb_inventory_sync.reconciliation.reconciliation_outcomes import (
    ReconciliationOutcome,
    SyncStats,
)
from cmdb_inventory_sync.results_reporting import (
    format_discovery_line,
    format_elapsed,
    format_finished_line,
    format_status_line,
    format_tally_line,
)


def test_discovery_line_uses_singular_for_one_entity() -> None:
    assert format_discovery_line(1) == "Importing 1 entity in ServiceNow:"
    assert format_discovery_line(0) == "Importing 0 entities in ServiceNow:"
    assert format_discovery_line(12) == "Importing 12 entities in ServiceNow:"


def test_status_line_for_written_entities() -> None:
    assert format_status_line(ReconciliationOutcome.imported(1, "e1", "web-01")) == (
        "\t1) web-01 imported;"
    )
    assert format_status_line(ReconciliationOutcome.updated(2, "e2", "db-02")) == (
        "\t2) db-02 updated;"
    )


def test_status_line_for_rejected_entities() -> None:
    outcome = ReconciliationOutcome.skipped_deleted(3, "host-AB12-1", "host-AB12-1")

    assert format_status_line(outcome) == "\t3) Cannot import host-AB12-1: entity deleted;"


@pytest.mark.parametrize(
    ("elapsed", "expected"),
    [(0, "00:00"), (5.9, "00:05"), (61, "01:01"), (600, "10:00"), (6000, "100:00")],
)
def test_format_elapsed_is_zero_padded_minutes_and_seconds(elapsed: float, expected: str) -> None:
    assert format_elapsed(elapsed) == expected


def test_finished_and_tally_lines() -> None:
    stats = SyncStats(imported=3, updated=2, duplicated=1, errors=4)

    assert format_finished_line(75) == "Operation finished in 01:15:"
    assert format_tally_line(stats) == (
        "\t3 imported, 2 updated, 5 errors (1 duplicated, 4 others)."
    )
