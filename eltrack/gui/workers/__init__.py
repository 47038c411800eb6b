"""Background worker threads for GUI."""

from .account_status_worker import AccountStatusWorkerThread
from .base_worker import CancellableWorker
from .sync_worker import SyncWorkerThread, start_startup_sync

__all__ = [
    "CancellableWorker",
    "SyncWorkerThread",
    "AccountStatusWorkerThread",
    "start_startup_sync",
]
