"""Worker thread for checking the cloud account status."""

from PyQt6.QtCore import pyqtSignal

from eltrack.gui.workers.base_worker import CancellableWorker
from eltrack.interfaces import RemoteStore


class AccountStatusWorkerThread(CancellableWorker):
    """Worker thread for the advisory account status check.

    Emits result_ready with an AccountStatus, or nothing if cancelled.
    """

    result_ready = pyqtSignal(object)  # AccountStatus

    def __init__(self, remote: RemoteStore, parent=None):
        super().__init__(parent)
        self.remote = remote

    def run(self) -> None:
        """Execute the status check in background thread."""
        try:
            if self.check_cancelled():
                return

            status = self.remote.account_status()

            if not self.check_cancelled():
                self.result_ready.emit(status)
        except Exception as e:
            if not self.check_cancelled():
                self.error.emit(f"Error checking cloud account: {e}")
