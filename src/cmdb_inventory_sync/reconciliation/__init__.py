"""Reconciliation exports."""

from .entity_reconciler import REQUIRED_FIELD, EntityReconciler
from .reconciliation_outcomes import OutcomeKind, ReconciliationOutcome, SyncStats

__all__ = [
    "REQUIRED_FIELD",
    "EntityReconciler",
    "OutcomeKind",
    "ReconciliationOutcome",
    "SyncStats",
]
