"""Merge of local and remote ride lists."""

import logging
import threading

from eltrack.exceptions import RemoteError
from eltrack.interfaces import RemoteStore
from eltrack.models import (
    ElevatorEntry,
    ReconcileOutcome,
    SyncState,
    SyncSummary,
    sort_most_recent_first,
)

from .local_store import LocalStore

logger = logging.getLogger(__name__)

SYNC_IN_PROGRESS_MESSAGE = "Sync already in progress"


def merge_entries(
    local: list[ElevatorEntry], remote: list[ElevatorEntry]
) -> tuple[list[ElevatorEntry], SyncSummary]:
    """Union local and remote entries by id.

    Local entries are kept as they are; remote entries whose id is not
    known locally are appended. The result is sorted newest first.

    Returns:
        Tuple of (merged entries, summary counts)
    """
    local_ids = {e.id for e in local}
    remote_ids = {e.id for e in remote}

    new_from_remote = []
    seen_new = set()
    for entry in remote:
        if entry.id not in local_ids and entry.id not in seen_new:
            new_from_remote.append(entry)
            seen_new.add(entry.id)
    local_only = [e for e in local if e.id not in remote_ids]

    merged = sort_most_recent_first(list(local) + new_from_remote)
    summary = SyncSummary(
        downloaded=len(new_from_remote),
        duplicates_removed=len(local_ids & remote_ids),
        local_only=len(local_only),
    )
    return merged, summary


def describe_summary(summary: SyncSummary) -> str:
    """Human-readable status line for a successful sync."""
    if summary.downloaded == 0:
        message = "Already up to date"
    elif summary.downloaded == 1:
        message = "Downloaded 1 ride"
    else:
        message = f"Downloaded {summary.downloaded} rides"
    if summary.local_only:
        message += f" ({summary.local_only} only on this device)"
    return message


class Reconciler:
    """Reconcile the local ride list with the remote store on demand.

    Only one reconciliation runs at a time; a concurrent request is
    rejected with an IN_PROGRESS outcome. Entries present locally but
    absent remotely are left alone and only counted.
    """

    def __init__(self, local_store: LocalStore, remote: RemoteStore):
        """Initialize the reconciler.

        Args:
            local_store: Store the merged list is persisted to
            remote: Store the remote snapshot is fetched from
        """
        self.local_store = local_store
        self.remote = remote
        self._guard = threading.Lock()

    @property
    def in_progress(self) -> bool:
        return self._guard.locked()

    def reconcile(
        self,
        local_entries: list[ElevatorEntry],
        cancel_event: threading.Event | None = None,
    ) -> ReconcileOutcome:
        """Fetch the remote snapshot, merge it in and persist the result.

        Never raises. On failure or cancellation the outcome carries the
        untouched local list and nothing is written.

        Args:
            local_entries: Current in-memory entries
            cancel_event: Optional flag checked around the network call

        Returns:
            ReconcileOutcome with the list the owner should hold afterwards
        """
        local_entries = list(local_entries)

        if not self._guard.acquire(blocking=False):
            logger.info("Sync requested while another sync is running")
            return ReconcileOutcome(
                state=SyncState.IN_PROGRESS,
                message=SYNC_IN_PROGRESS_MESSAGE,
                entries=local_entries,
            )

        try:
            if cancel_event is not None and cancel_event.is_set():
                return self._cancelled(local_entries)

            try:
                remote_entries = self.remote.fetch_all()
            except RemoteError as e:
                logger.warning(f"Sync failed while fetching remote rides: {e.message}")
                return ReconcileOutcome(
                    state=SyncState.FAILED,
                    message=f"Sync failed: {e.message}",
                    entries=local_entries,
                    error_kind=e.kind,
                )

            if cancel_event is not None and cancel_event.is_set():
                return self._cancelled(local_entries)

            merged, summary = merge_entries(local_entries, remote_entries)
            self.local_store.save(merged)

            logger.info(
                f"Sync complete: {summary.downloaded} downloaded, "
                f"{summary.duplicates_removed} already present, {summary.local_only} local only"
            )
            return ReconcileOutcome(
                state=SyncState.SUCCESS,
                message=describe_summary(summary),
                entries=merged,
                summary=summary,
            )
        finally:
            self._guard.release()

    @staticmethod
    def _cancelled(local_entries: list[ElevatorEntry]) -> ReconcileOutcome:
        return ReconcileOutcome(
            state=SyncState.CANCELLED,
            message="Sync cancelled",
            entries=local_entries,
        )
