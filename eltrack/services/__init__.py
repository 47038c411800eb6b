"""Business logic services for ElTrack."""

from .export_service import ExportService
from .local_store import LocalStore, deserialize, serialize
from .reconciler import Reconciler, merge_entries
from .remote_store import HttpRecordStore, InMemoryRecordStore
from .remote_sync_queue import RemoteSyncQueue
from .settings_store import JsonSettingsStore, MemorySettingsStore
from .validation_service import ValidationService

__all__ = [
    "JsonSettingsStore",
    "MemorySettingsStore",
    "LocalStore",
    "serialize",
    "deserialize",
    "HttpRecordStore",
    "InMemoryRecordStore",
    "RemoteSyncQueue",
    "Reconciler",
    "merge_entries",
    "ExportService",
    "ValidationService",
]
