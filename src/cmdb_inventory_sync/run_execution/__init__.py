"""Run execution domain exports."""

from .run_contracts import SyncRequest, SyncSummary
from .sync_run_use_case import SyncRunError, execute_sync_run, run_synchronization

__all__ = [
    "SyncRequest",
    "SyncSummary",
    "SyncRunError",
    "execute_sync_run",
    "run_synchronization",
]
