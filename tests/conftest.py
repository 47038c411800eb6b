"""Pytest configuration and shared fixtures."""

import uuid
from datetime import datetime

import pytest

from eltrack.config import ElTrackConfig
from eltrack.models import ElevatorEntry, ElevatorType
from eltrack.presenters import NullPresenter
from eltrack.services import InMemoryRecordStore, LocalStore, MemorySettingsStore


def _local_time(year=2025, month=1, day=5, hour=12, minute=0, second=0) -> datetime:
    """Timezone-aware datetime for a wall-clock time in the local zone."""
    return datetime(year, month, day, hour, minute, second).astimezone()


@pytest.fixture
def local_time():
    """Provide a factory for local-zone timestamps (noon by default)."""
    return _local_time


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with temporary paths and no retry delays."""
    return ElTrackConfig(
        data_dir=temp_dir / "data",
        remote_url="https://records.test/api",
        remote_token="test-token",
        remote_timeout=2.0,
        retry_max_attempts=3,
        retry_base_delay=0.0,
        retry_max_delay=0.0,
        push_workers=1,
        export_dir=temp_dir / "exports",
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def make_entry():
    """Factory fixture for creating ElevatorEntry instances with sensible defaults."""

    def _make(
        starting_floor="L",
        ending_floor="75",
        elevator=ElevatorType.H1,
        when=None,
        entry_id=None,
    ):
        return ElevatorEntry(
            starting_floor=starting_floor,
            ending_floor=ending_floor,
            elevator=elevator,
            id=entry_id or uuid.uuid4(),
            timestamp=when or _local_time(),
        )

    return _make


@pytest.fixture
def settings():
    """Provide an empty in-memory settings store."""
    return MemorySettingsStore()


@pytest.fixture
def local_store(settings):
    """Provide a LocalStore over the in-memory settings store."""
    return LocalStore(settings)


@pytest.fixture
def remote():
    """Provide an empty in-memory remote record store."""
    return InMemoryRecordStore()


class RecordingObserver:
    """A real EntryObserver implementation that records every snapshot."""

    def __init__(self):
        self.snapshots = []

    def on_entries_changed(self, entries) -> None:
        self.snapshots.append(entries)

    @property
    def last(self):
        return self.snapshots[-1] if self.snapshots else None


@pytest.fixture
def recording_observer():
    """Provide an observer that records every notification."""
    return RecordingObserver()
