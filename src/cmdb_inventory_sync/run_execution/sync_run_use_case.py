"""Synchronization run use-case service."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from cmdb_inventory_sync.cmdb_destination import DestinationApi, DestinationApiClient
from cmdb_inventory_sync.configuration import (
    Configuration,
    DestinationSettings,
    SourceSettings,
    load_configuration,
)
from cmdb_inventory_sync.reconciliation import (
    EntityReconciler,
    ReconciliationOutcome,
    SyncStats,
)
from cmdb_inventory_sync.results_reporting import (
    ProgressReporter,
    discard_progress,
    format_discovery_line,
    format_finished_line,
    format_status_line,
    format_tally_line,
)
from cmdb_inventory_sync.source_inventory import (
    DEFAULT_PAGE_SIZE,
    SourceApi,
    SourceApiClient,
    SourceApiError,
    list_all_ids,
)

from .run_contracts import SyncRequest, SyncSummary

logger = logging.getLogger(__name__)

SourceFactory = Callable[[SourceSettings], SourceApi]
DestinationFactory = Callable[[DestinationSettings], DestinationApi]


class SyncRunError(Exception):
    """Raised when a synchronization run cannot be completed."""


def execute_sync_run(
    request: SyncRequest,
    *,
    source_factory: SourceFactory | None = None,
    destination_factory: DestinationFactory | None = None,
    reporter: ProgressReporter | None = None,
    clock: Callable[[], float] | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> SyncSummary:
    """Load configuration, then execute one full synchronization run.

    Configuration problems raise `ConfigurationError` before any network call.
    """
    configuration = load_configuration(request.config_path)
    return run_synchronization(
        configuration,
        source_factory=source_factory,
        destination_factory=destination_factory,
        reporter=reporter,
        clock=clock,
        page_size=page_size,
    )


def run_synchronization(
    configuration: Configuration,
    *,
    source_factory: SourceFactory | None = None,
    destination_factory: DestinationFactory | None = None,
    reporter: ProgressReporter | None = None,
    clock: Callable[[], float] | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> SyncSummary:
    """Reconcile every source entity sequentially, in listing order."""
    report = reporter or discard_progress
    now = clock or time.monotonic
    started = now()

    source = (source_factory or SourceApiClient)(configuration.source)
    destination = (destination_factory or DestinationApiClient)(configuration.destination)

    try:
        entity_ids = list_all_ids(source, page_size=page_size)
    except SourceApiError as exc:
        raise SyncRunError(f"Error during the script execution: {exc}") from exc
    report(format_discovery_line(len(entity_ids)))
    logger.info(
        "Synchronizing %d entities with mapping '%s' into table '%s'",
        len(entity_ids),
        configuration.mapping.name,
        configuration.destination.table,
    )

    reconciler = EntityReconciler(
        source=source,
        destination=destination,
        mapping=configuration.mapping,
        table=configuration.destination.table,
    )
    stats = SyncStats()
    outcomes: list[ReconciliationOutcome] = []
    for entity_id in entity_ids:
        outcome = reconciler.reconcile_one(entity_id, stats)
        outcomes.append(outcome)
        report(format_status_line(outcome), is_error=not outcome.is_written)

    elapsed_seconds = now() - started
    report(format_finished_line(elapsed_seconds))
    report(format_tally_line(stats))
    return SyncSummary.from_stats(
        stats,
        discovered=len(entity_ids),
        elapsed_seconds=elapsed_seconds,
        outcomes=tuple(outcomes),
    )
