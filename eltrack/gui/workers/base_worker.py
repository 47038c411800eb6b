"""Base class for cancellable background workers."""

import threading

from PyQt6.QtCore import QThread, pyqtSignal


class CancellableWorker(QThread):
    """QThread that remote calls can be run on without blocking the GUI.

    Subclasses check ``check_cancelled()`` before and after their network
    call and emit ``error`` for unexpected exceptions. Results emitted
    through signals are delivered on the GUI thread, which is the only
    place the ride list's observers touch widgets.
    """

    error = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._cancel_event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation; the worker stops at its next checkpoint."""
        self._cancel_event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def check_cancelled(self) -> bool:
        """Return True if run() should stop now."""
        return self._cancel_event.is_set()
