"""Entry observer that forwards ride list changes as a Qt signal."""

from PyQt6.QtCore import QObject, pyqtSignal

from eltrack.models import ElevatorEntry


class GUIEntryObserver(QObject):
    """Thread-safe EntryObserver using a Qt signal.

    Implements EntryObserver protocol through structural subtyping. A sync
    finishing on a worker thread notifies observers there; connecting
    ``entries_changed`` to a widget slot delivers the snapshot on the GUI
    thread instead.
    """

    entries_changed = pyqtSignal(tuple)  # tuple[ElevatorEntry, ...]

    def __init__(self, parent=None):
        super().__init__(parent)

    def on_entries_changed(self, entries: tuple[ElevatorEntry, ...]) -> None:
        self.entries_changed.emit(tuple(entries))
