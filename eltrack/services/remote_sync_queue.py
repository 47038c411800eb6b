"""Background propagation of local changes to the remote store."""

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor, wait

from eltrack.config import ElTrackConfig
from eltrack.exceptions import RemoteError, RemoteErrorKind
from eltrack.interfaces import RemoteStore
from eltrack.models import ElevatorEntry, PushResult

logger = logging.getLogger(__name__)


class RemoteSyncQueue:
    """Runs remote saves and deletes off the caller's thread.

    Local changes never wait on this queue. Each push is retried with
    exponential backoff while the error is retryable, and a shared
    cancellation flag is honoured before every network call and during
    backoff waits. Failures are logged and returned, never raised.
    """

    def __init__(self, remote: RemoteStore, config: ElTrackConfig):
        """Initialize the push queue.

        Args:
            remote: Store that receives the pushes
            config: Configuration with retry and worker settings
        """
        self.remote = remote
        self.config = config
        self._cancel_event = threading.Event()
        self._executor = ThreadPoolExecutor(
            max_workers=config.push_workers, thread_name_prefix="eltrack-push"
        )
        self._unreported: set[Future] = set()
        self._lock = threading.Lock()

    @property
    def is_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def cancel(self) -> None:
        """Stop queued and retrying pushes at their next checkpoint."""
        self._cancel_event.set()

    def backoff_delay(self, attempt: int) -> float:
        """Seconds to wait after the given failed attempt (0-based)."""
        return min(self.config.retry_base_delay * (2**attempt), self.config.retry_max_delay)

    def push_save(self, entry: ElevatorEntry) -> "Future[PushResult]":
        """Queue an upsert of entry."""
        return self._submit("save", entry.record_name, lambda: self.remote.save(entry))

    def push_delete(self, entry_id: str) -> "Future[PushResult]":
        """Queue deletion of the record for entry_id."""
        entry_id = str(entry_id)
        return self._submit("delete", entry_id, lambda: self.remote.delete(entry_id))

    def push_delete_many(self, entry_ids: list[str]) -> list["Future[PushResult]"]:
        return [self.push_delete(entry_id) for entry_id in entry_ids]

    def wait_idle(self, timeout: float | None = None) -> list[PushResult]:
        """Block until all queued pushes finish (or timeout).

        Returns:
            Results of the pushes submitted since the previous call that
            have completed; unfinished ones are reported next time
        """
        with self._lock:
            unreported = set(self._unreported)
        done, _ = wait(unreported, timeout=timeout)
        with self._lock:
            self._unreported -= done
        return [f.result() for f in done if not f.cancelled()]

    def shutdown(self, wait_for_pending: bool = True) -> None:
        """Stop accepting pushes and release the worker threads."""
        if not wait_for_pending:
            self.cancel()
        self._executor.shutdown(wait=wait_for_pending, cancel_futures=not wait_for_pending)

    def _submit(self, operation: str, entry_id: str, call: Callable[[], None]) -> Future:
        future = self._executor.submit(self.run_with_retry, operation, entry_id, call)
        with self._lock:
            self._unreported.add(future)
        return future

    def run_with_retry(self, operation: str, entry_id: str, call: Callable[[], None]) -> PushResult:
        """Run one remote call under the retry policy.

        Args:
            operation: "save" or "delete" (NOT_FOUND counts as success for deletes)
            entry_id: Id of the entry being pushed
            call: Zero-argument callable performing the remote request

        Returns:
            PushResult describing the final outcome
        """
        max_attempts = self.config.retry_max_attempts
        last_error: RemoteError | None = None

        for attempt in range(max_attempts):
            if self._cancel_event.is_set():
                return PushResult(operation, entry_id, ok=False, attempts=attempt, cancelled=True)

            try:
                call()
                return PushResult(operation, entry_id, ok=True, attempts=attempt + 1)
            except RemoteError as e:
                if operation == "delete" and e.kind is RemoteErrorKind.NOT_FOUND:
                    logger.debug(f"Remote record {entry_id} already absent")
                    return PushResult(operation, entry_id, ok=True, attempts=attempt + 1)
                last_error = e
            except Exception as e:
                logger.exception(f"Unexpected error during remote {operation} of {entry_id}")
                last_error = RemoteError(RemoteErrorKind.TRANSIENT, str(e))

            if not last_error.kind.retryable:
                break

            if attempt + 1 < max_attempts:
                delay = self.backoff_delay(attempt)
                logger.warning(
                    f"Remote {operation} of {entry_id} failed "
                    f"(attempt {attempt + 1}/{max_attempts}): {last_error.message}; "
                    f"retrying in {delay:.1f}s"
                )
                if self._cancel_event.wait(delay):
                    return PushResult(
                        operation,
                        entry_id,
                        ok=False,
                        attempts=attempt + 1,
                        error=last_error.message,
                        error_kind=last_error.kind,
                        cancelled=True,
                    )

        logger.error(f"Remote {operation} of {entry_id} failed: {last_error.message}")
        return PushResult(
            operation,
            entry_id,
            ok=False,
            attempts=attempt + 1,
            error=last_error.message,
            error_kind=last_error.kind,
        )
