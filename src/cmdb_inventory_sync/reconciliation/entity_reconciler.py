"""Per-entity reconciliation of source records into the CMDB."""

from __future__ import annotations

import logging

from cmdb_inventory_sync.cmdb_destination import DestinationApi, DestinationApiError
from cmdb_inventory_sync.field_mapping import DestinationRecord, FieldMapping, map_entity
from cmdb_inventory_sync.source_inventory import SourceApi

from .reconciliation_outcomes import ReconciliationOutcome, SyncStats

logger = logging.getLogger(__name__)

REQUIRED_FIELD = "serial_number"


class EntityReconciler:
    """Decides and applies create or update for one source entity at a time."""

    def __init__(
        self,
        *,
        source: SourceApi,
        destination: DestinationApi,
        mapping: FieldMapping,
        table: str,
    ) -> None:
        self._source = source
        self._destination = destination
        self._mapping = mapping
        self._table = table

    def reconcile_one(self, entity_id: str, stats: SyncStats) -> ReconciliationOutcome:
        """Reconcile one entity and record its outcome in `stats`.

        Never raises for per-entity failures; they become outcomes.
        """
        sequence = stats.claim_sequence()
        outcome = self._reconcile(sequence, entity_id)
        stats.record(outcome)
        return outcome

    def _reconcile(self, sequence: int, entity_id: str) -> ReconciliationOutcome:
        name = entity_id
        try:
            record = self._source.fetch_record(entity_id)
            if record.is_deleted:
                return ReconciliationOutcome.skipped_deleted(sequence, entity_id, name)

            mapped = map_entity(record, self._mapping)
            name = _display_name(mapped, entity_id)
            if self._mapping.declares(REQUIRED_FIELD) and _is_empty(mapped.get(REQUIRED_FIELD)):
                return ReconciliationOutcome.skipped_missing_field(
                    sequence, entity_id, name, REQUIRED_FIELD
                )
            return self._write(sequence, entity_id, name, mapped)
        except DestinationApiError as exc:
            if exc.is_uniqueness_violation:
                return ReconciliationOutcome.duplicate(sequence, entity_id, name, self._table)
            logger.debug("Destination failure for %s", entity_id, exc_info=True)
            return ReconciliationOutcome.failed(sequence, entity_id, name, exc)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.debug("Reconciliation failure for %s", entity_id, exc_info=True)
            return ReconciliationOutcome.failed(sequence, entity_id, name, exc)

    def _write(
        self, sequence: int, entity_id: str, name: str, mapped: DestinationRecord
    ) -> ReconciliationOutcome:
        existing = self._destination.find_sys_ids_by_asset_tag(mapped.asset_tag or "")
        if existing:
            self._destination.update(existing[0], mapped)
            return ReconciliationOutcome.updated(sequence, entity_id, name)
        self._destination.create(mapped)
        return ReconciliationOutcome.imported(sequence, entity_id, name)


def _display_name(mapped: DestinationRecord, entity_id: str) -> str:
    name = mapped.name
    return entity_id if _is_empty(name) else str(name)


def _is_empty(value: object) -> bool:
    return value is None or value == ""
