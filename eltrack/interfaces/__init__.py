"""Interface protocols for ElTrack."""

from .entry_observer import EntryObserver
from .presenter import PresenterProtocol
from .remote_store import RemoteStore
from .settings_store import SettingsStore

__all__ = ["EntryObserver", "PresenterProtocol", "RemoteStore", "SettingsStore"]
