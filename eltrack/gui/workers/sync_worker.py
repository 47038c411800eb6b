"""Worker thread for cloud sync."""

from PyQt6.QtCore import pyqtSignal

from eltrack.config import ElTrackConfig
from eltrack.gui.workers.base_worker import CancellableWorker
from eltrack.orchestration import RideLog


class SyncWorkerThread(CancellableWorker):
    """Worker thread running RideLog.sync() off the GUI thread.

    The ride log rejects overlapping syncs itself, so a manual sync started
    while the startup sync is still running reports "Sync already in
    progress" instead of racing it.
    """

    result_ready = pyqtSignal(object)  # ReconcileOutcome

    def __init__(self, ride_log: RideLog, parent=None):
        """Initialize the sync worker thread.

        Args:
            ride_log: Ride log to sync
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self.ride_log = ride_log

    def cancel(self) -> None:
        """Request cancellation of the worker and of the running sync."""
        super().cancel()
        self.ride_log.cancel_sync()

    def run(self) -> None:
        """Execute sync in background thread."""
        try:
            if self.check_cancelled():
                return

            outcome = self.ride_log.sync()

            if not self.check_cancelled():
                self.result_ready.emit(outcome)
        except Exception as e:
            if not self.check_cancelled():
                self.error.emit(f"Error during sync: {e}")


def start_startup_sync(
    ride_log: RideLog, config: ElTrackConfig, parent=None
) -> SyncWorkerThread | None:
    """Start the automatic sync run when the application opens.

    Returns:
        The started worker, or None if startup sync is disabled or the
        ride log has no cloud store
    """
    if not config.sync_on_startup or ride_log.reconciler is None:
        return None
    worker = SyncWorkerThread(ride_log, parent)
    worker.start()
    return worker
