"""Observer protocol for entry list changes."""

from typing import Protocol

from eltrack.models import ElevatorEntry


class EntryObserver(Protocol):
    """Interface for anything that redraws when the ride list changes.

    The RideLog calls observers after every mutation or sync, always with
    the full list sorted newest first.
    """

    def on_entries_changed(self, entries: tuple[ElevatorEntry, ...]) -> None:
        """Called with a snapshot of the current entry list.

        Args:
            entries: Current entries, most recent first
        """
        ...
