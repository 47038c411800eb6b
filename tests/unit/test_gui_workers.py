"""Tests for the GUI sync workers and signal adapters.

run() is called directly on the test thread, so signals are delivered
synchronously to the connected slots.

Requires PyQt6 to be importable. Tests are skipped if it is unavailable.
"""

from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from eltrack.models import AccountStatus, ElevatorType, SyncState
from eltrack.orchestration import RideLog
from eltrack.services import Reconciler

# Skip all tests in this module if PyQt6 is not available
try:
    from PyQt6.QtCore import QCoreApplication

    # Signals need an application instance; no display is required
    _app = QCoreApplication.instance() or QCoreApplication([])
    _HAS_QT = True
except (ImportError, RuntimeError):
    _HAS_QT = False

pytestmark = pytest.mark.skipif(not _HAS_QT, reason="PyQt6 not available")


@pytest.fixture
def synced_log(local_store, remote):
    return RideLog(local_store, reconciler=Reconciler(local_store, remote))


class TestSyncWorkerThread:
    """Tests for SyncWorkerThread."""

    def test_emits_outcome(self, synced_log, remote, make_entry):
        from eltrack.gui.workers import SyncWorkerThread

        remote.save(make_entry())
        worker = SyncWorkerThread(synced_log)
        results = []
        worker.result_ready.connect(results.append)

        worker.run()

        assert len(results) == 1
        assert results[0].state is SyncState.SUCCESS
        assert len(synced_log) == 1

    def test_cancelled_before_start_emits_nothing(self, synced_log):
        from eltrack.gui.workers import SyncWorkerThread

        worker = SyncWorkerThread(synced_log)
        results = []
        worker.result_ready.connect(results.append)

        worker.cancel()
        worker.run()

        assert worker.is_cancelled
        assert results == []

    def test_cancel_reaches_ride_log(self):
        from eltrack.gui.workers import SyncWorkerThread

        ride_log = MagicMock()
        SyncWorkerThread(ride_log).cancel()
        ride_log.cancel_sync.assert_called_once()

    def test_unexpected_error_is_emitted(self):
        from eltrack.gui.workers import SyncWorkerThread

        ride_log = MagicMock()
        ride_log.sync.side_effect = RuntimeError("disk on fire")
        worker = SyncWorkerThread(ride_log)
        errors = []
        worker.error.connect(errors.append)

        worker.run()

        assert errors == ["Error during sync: disk on fire"]


class TestStartupSync:
    """Tests for start_startup_sync."""

    def test_disabled_by_config(self, synced_log, test_config):
        from eltrack.gui.workers import start_startup_sync

        config = replace(test_config, sync_on_startup=False)
        assert start_startup_sync(synced_log, config) is None

    def test_skipped_without_remote(self, local_store, test_config):
        from eltrack.gui.workers import start_startup_sync

        assert start_startup_sync(RideLog(local_store), test_config) is None

    def test_starts_worker(self, synced_log, test_config):
        from eltrack.gui.workers import start_startup_sync

        worker = start_startup_sync(synced_log, test_config)
        try:
            assert worker is not None
            assert worker.wait(5000)
        finally:
            worker.cancel()


class TestAccountStatusWorkerThread:
    """Tests for AccountStatusWorkerThread."""

    def test_emits_status(self, remote):
        from eltrack.gui.workers import AccountStatusWorkerThread

        remote.status = AccountStatus.RESTRICTED
        worker = AccountStatusWorkerThread(remote)
        results = []
        worker.result_ready.connect(results.append)

        worker.run()

        assert results == [AccountStatus.RESTRICTED]

    def test_error_is_emitted(self):
        from eltrack.gui.workers import AccountStatusWorkerThread

        remote = MagicMock()
        remote.account_status.side_effect = RuntimeError("boom")
        worker = AccountStatusWorkerThread(remote)
        errors = []
        worker.error.connect(errors.append)

        worker.run()

        assert errors == ["Error checking cloud account: boom"]


class TestSignalAdapters:
    """Tests for GUIPresenter and GUIEntryObserver."""

    def test_entry_observer_forwards_snapshots(self, local_store):
        from eltrack.gui.presenters import GUIEntryObserver

        observer = GUIEntryObserver()
        snapshots = []
        observer.entries_changed.connect(snapshots.append)
        ride_log = RideLog(local_store)
        ride_log.subscribe(observer)

        entry = ride_log.add_entry("L", "75", ElevatorType.H1)

        assert snapshots == [(entry,)]

    def test_presenter_emits_signals(self):
        from eltrack.gui.presenters import GUIPresenter

        presenter = GUIPresenter()
        received = []
        presenter.error_signal.connect(received.append)
        presenter.account_status_signal.connect(received.append)

        presenter.show_error("bad")
        presenter.show_account_status(AccountStatus.AVAILABLE)

        assert received == ["bad", AccountStatus.AVAILABLE]
