"""Reconciliation domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutcomeKind(str, Enum):
    """Per-entity reconciliation outcome."""

    IMPORTED = "imported"
    UPDATED = "updated"
    SKIPPED_DELETED = "skipped_deleted"
    SKIPPED_MISSING_REQUIRED_FIELD = "skipped_missing_required_field"
    DUPLICATE_CONFLICT = "duplicate_conflict"
    OTHER_ERROR = "other_error"


@dataclass(frozen=True)
class ReconciliationOutcome:
    """Outcome of reconciling one source entity into the CMDB."""

    sequence: int
    entity_id: str
    name: str
    kind: OutcomeKind
    reason: str | None = None

    @property
    def is_written(self) -> bool:
        """True when the CMDB accepted a create or update."""
        return self.kind in (OutcomeKind.IMPORTED, OutcomeKind.UPDATED)

    @staticmethod
    def imported(sequence: int, entity_id: str, name: str) -> ReconciliationOutcome:
        return ReconciliationOutcome(sequence, entity_id, name, OutcomeKind.IMPORTED)

    @staticmethod
    def updated(sequence: int, entity_id: str, name: str) -> ReconciliationOutcome:
        return ReconciliationOutcome(sequence, entity_id, name, OutcomeKind.UPDATED)

    @staticmethod
    def skipped_deleted(sequence: int, entity_id: str, name: str) -> ReconciliationOutcome:
        return ReconciliationOutcome(
            sequence, entity_id, name, OutcomeKind.SKIPPED_DELETED, "entity deleted"
        )

    @staticmethod
    def skipped_missing_field(
        sequence: int, entity_id: str, name: str, field_name: str
    ) -> ReconciliationOutcome:
        reason = f"{field_name.replace('_', ' ')} not found at the given path"
        return ReconciliationOutcome(
            sequence, entity_id, name, OutcomeKind.SKIPPED_MISSING_REQUIRED_FIELD, reason
        )

    @staticmethod
    def duplicate(sequence: int, entity_id: str, name: str, table: str) -> ReconciliationOutcome:
        reason = f'entity with name "{name}" already exists in table "{table}"'
        return ReconciliationOutcome(
            sequence, entity_id, name, OutcomeKind.DUPLICATE_CONFLICT, reason
        )

    @staticmethod
    def failed(
        sequence: int, entity_id: str, name: str, error: Exception
    ) -> ReconciliationOutcome:
        return ReconciliationOutcome(
            sequence, entity_id, name, OutcomeKind.OTHER_ERROR, str(error)
        )


@dataclass
class SyncStats:
    """Running tally of a synchronization run.

    Deleted entities, entities missing a required field and unexpected
    failures are all counted under `errors` ("others").
    """

    imported: int = 0
    updated: int = 0
    duplicated: int = 0
    errors: int = 0
    next_sequence: int = 1

    def claim_sequence(self) -> int:
        """Return the number of the next processed entity and advance the counter."""
        sequence = self.next_sequence
        self.next_sequence += 1
        return sequence

    def record(self, outcome: ReconciliationOutcome) -> None:
        if outcome.kind is OutcomeKind.IMPORTED:
            self.imported += 1
        elif outcome.kind is OutcomeKind.UPDATED:
            self.updated += 1
        elif outcome.kind is OutcomeKind.DUPLICATE_CONFLICT:
            self.duplicated += 1
        else:
            self.errors += 1

    @property
    def total_errors(self) -> int:
        return self.duplicated + self.errors
