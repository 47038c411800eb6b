"""Owner of the in-memory ride list."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime

from eltrack.interfaces import EntryObserver
from eltrack.models import (
    ElevatorEntry,
    ElevatorType,
    ReconcileOutcome,
    SyncState,
    sort_most_recent_first,
)
from eltrack.services import ExportService, LocalStore, Reconciler, RemoteSyncQueue
from eltrack.services.reconciler import SYNC_IN_PROGRESS_MESSAGE

logger = logging.getLogger(__name__)


class RideLog:
    """The single owner of the ride list.

    Pass one instance to whatever needs the rides; there is no global.
    Every mutation updates the list first, saves it locally (best-effort)
    and then hands the remote side to the push queue without waiting.
    Observers are told about every change with a snapshot sorted newest
    first.
    """

    def __init__(
        self,
        local_store: LocalStore,
        push_queue: RemoteSyncQueue | None = None,
        reconciler: Reconciler | None = None,
        export_service: ExportService | None = None,
    ):
        """Initialize the ride log.

        Args:
            local_store: Offline source of truth
            push_queue: Optional queue propagating changes to the cloud
            reconciler: Optional reconciler used by sync()
            export_service: CSV renderer (a default one is created if omitted)
        """
        self.local_store = local_store
        self.push_queue = push_queue
        self.reconciler = reconciler
        self.export_service = export_service or ExportService()
        self._entries: list[ElevatorEntry] = []
        self._observers: list[EntryObserver] = []
        self._lock = threading.RLock()
        self._sync_cancel = threading.Event()
        self._sync_guard = threading.Lock()

    # ------------------------------------------------------------------
    # State and observers
    # ------------------------------------------------------------------

    @property
    def entries(self) -> tuple[ElevatorEntry, ...]:
        """Snapshot of the rides, most recent first."""
        with self._lock:
            return tuple(self._entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, entry_id: str) -> ElevatorEntry | None:
        """Find a ride by id (full id or unique prefix)."""
        needle = str(entry_id).lower()
        with self._lock:
            exact = [e for e in self._entries if str(e.id) == needle]
            if exact:
                return exact[0]
            matches = [e for e in self._entries if str(e.id).startswith(needle)]
        return matches[0] if len(matches) == 1 else None

    def subscribe(self, observer: EntryObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: EntryObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self) -> None:
        snapshot = self.entries
        for observer in list(self._observers):
            try:
                observer.on_entries_changed(snapshot)
            except Exception:
                logger.exception(f"Entry observer {observer!r} failed")

    def _replace(self, entries: list[ElevatorEntry]) -> None:
        """Swap in a new list, persist it and notify. Caller holds the lock."""
        self._entries = sort_most_recent_first(entries)
        self.local_store.save(self._entries)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def load(self) -> tuple[ElevatorEntry, ...]:
        """Replace the in-memory list with what the local store holds."""
        with self._lock:
            self._entries = sort_most_recent_first(self.local_store.load())
        logger.debug(f"Loaded {len(self._entries)} rides from local storage")
        self._notify()
        return self.entries

    def add_entry(
        self,
        starting_floor: str,
        ending_floor: str,
        elevator: ElevatorType,
        now: datetime | None = None,
    ) -> ElevatorEntry:
        """Record a new ride.

        Returns:
            The created entry
        """
        entry = ElevatorEntry.create(starting_floor, ending_floor, elevator, now=now)
        with self._lock:
            self._replace([entry] + self._entries)
        self._notify()
        if self.push_queue is not None:
            self.push_queue.push_save(entry)
        return entry

    def delete_entry(self, entry_id: str) -> bool:
        """Delete one ride by id.

        The remote delete is queued even if the id is unknown locally; a
        record already absent remotely counts as deleted.

        Returns:
            True if a local ride was removed, False if none matched
        """
        entry_id = str(entry_id)
        with self._lock:
            remaining = [e for e in self._entries if str(e.id) != entry_id]
            removed = len(remaining) != len(self._entries)
            if removed:
                self._replace(remaining)
        if removed:
            self._notify()
        if self.push_queue is not None:
            self.push_queue.push_delete(entry_id)
        return removed

    def clear_all(self) -> int:
        """Delete every ride.

        Returns:
            Number of rides removed
        """
        with self._lock:
            removed = list(self._entries)
            self._replace([])
        self._notify()
        if self.push_queue is not None:
            self.push_queue.push_delete_many([e.record_name for e in removed])
        return len(removed)

    # ------------------------------------------------------------------
    # Sync
    # ------------------------------------------------------------------

    def cancel_sync(self) -> None:
        """Ask a running sync to stop at its next checkpoint."""
        self._sync_cancel.set()

    def sync(self) -> ReconcileOutcome:
        """Merge the remote rides into the local list.

        Rides added or deleted while the fetch was in flight are kept as
        they are; only rides downloaded by this sync are added.

        Returns:
            ReconcileOutcome; never raises
        """
        if self.reconciler is None:
            return ReconcileOutcome(
                state=SyncState.FAILED,
                message="Cloud sync is not configured",
                entries=list(self.entries),
            )

        # A rejected sync must not clear a cancel aimed at the running one
        if not self._sync_guard.acquire(blocking=False):
            return ReconcileOutcome(
                state=SyncState.IN_PROGRESS,
                message=SYNC_IN_PROGRESS_MESSAGE,
                entries=list(self.entries),
            )
        try:
            self._sync_cancel.clear()
            snapshot = list(self.entries)
            outcome = self.reconciler.reconcile(snapshot, cancel_event=self._sync_cancel)
            if not outcome.ok:
                outcome.entries = list(self.entries)
                return outcome

            known_ids = {e.id for e in snapshot}
            downloaded = [e for e in outcome.entries if e.id not in known_ids]
            with self._lock:
                current_ids = {e.id for e in self._entries}
                fresh = [e for e in downloaded if e.id not in current_ids]
                self._replace(self._entries + fresh)
                outcome.entries = list(self._entries)
        finally:
            self._sync_guard.release()
        self._notify()
        return outcome

    def push_all(self) -> int:
        """Queue an upload of every local ride.

        Returns:
            Number of uploads queued (0 without a push queue)
        """
        if self.push_queue is None:
            return 0
        entries = self.entries
        for entry in entries:
            self.push_queue.push_save(entry)
        return len(entries)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export_csv(self) -> str:
        return self.export_service.to_csv(self.entries)

    def export_filename(self) -> str:
        return self.export_service.filename_for(self.entries)

    def close(self, wait_for_pushes: bool = True) -> None:
        """Release the push queue's worker threads."""
        self.cancel_sync()
        if self.push_queue is not None:
            self.push_queue.shutdown(wait_for_pending=wait_for_pushes)


def on_change(callback: Callable[[tuple[ElevatorEntry, ...]], None]) -> EntryObserver:
    """Wrap a plain callable as an EntryObserver."""

    class _CallbackObserver:
        def on_entries_changed(self, entries: tuple[ElevatorEntry, ...]) -> None:
            callback(entries)

    return _CallbackObserver()
