"""Data models for ElTrack."""

from .entry import ElevatorEntry, ElevatorType, FloorOption, sort_most_recent_first
from .sync import AccountStatus, PushResult, ReconcileOutcome, SyncState, SyncSummary
from .validation import RideValidation, ValidationIssue

__all__ = [
    "ElevatorEntry",
    "ElevatorType",
    "FloorOption",
    "sort_most_recent_first",
    "AccountStatus",
    "SyncState",
    "SyncSummary",
    "ReconcileOutcome",
    "PushResult",
    "RideValidation",
    "ValidationIssue",
]
