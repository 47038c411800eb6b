"""GUI presenter implementation using Qt signals for thread-safe communication."""

from PyQt6.QtCore import QObject, pyqtSignal

from eltrack.models import AccountStatus, ElevatorEntry, ReconcileOutcome


class GUIPresenter(QObject):
    """Thread-safe presenter using Qt signals.

    Implements PresenterProtocol through structural subtyping (duck typing).
    This avoids metaclass conflicts between QObject and Protocol metaclasses.

    Sync workers call presenter methods from their own thread; the signals
    are queued onto the GUI thread, so widgets are only touched there.
    """

    # Signals for thread-safe communication from worker threads to main thread
    info_signal = pyqtSignal(str)
    success_signal = pyqtSignal(str)
    warning_signal = pyqtSignal(str)
    error_signal = pyqtSignal(str)
    entries_signal = pyqtSignal(list)  # list[ElevatorEntry]
    sync_outcome_signal = pyqtSignal(object)  # ReconcileOutcome
    account_status_signal = pyqtSignal(object)  # AccountStatus

    def __init__(self, parent=None):
        """Initialize the GUI presenter.

        Args:
            parent: Optional parent QObject
        """
        super().__init__(parent)

    def show_info(self, message: str) -> None:
        self.info_signal.emit(message)

    def show_success(self, message: str) -> None:
        self.success_signal.emit(message)

    def show_warning(self, message: str) -> None:
        self.warning_signal.emit(message)

    def show_error(self, message: str) -> None:
        self.error_signal.emit(message)

    def show_entries(self, entries: list[ElevatorEntry]) -> None:
        self.entries_signal.emit(list(entries))

    def show_sync_outcome(self, outcome: ReconcileOutcome) -> None:
        """Display the result of a sync attempt.

        Args:
            outcome: The reconciliation outcome to display
        """
        self.sync_outcome_signal.emit(outcome)

    def show_account_status(self, status: AccountStatus) -> None:
        """Display the cloud account status.

        Args:
            status: Advisory account status
        """
        self.account_status_signal.emit(status)
