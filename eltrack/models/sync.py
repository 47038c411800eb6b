"""Data models for cloud sync results."""

from dataclasses import dataclass, field
from enum import Enum

from eltrack.exceptions import RemoteErrorKind

from .entry import ElevatorEntry


class AccountStatus(Enum):
    """Advisory state of the user's cloud account."""

    AVAILABLE = "available"
    NO_ACCOUNT = "noAccount"
    RESTRICTED = "restricted"
    UNKNOWN = "unknown"
    TEMPORARILY_UNAVAILABLE = "temporarilyUnavailable"

    @property
    def description(self) -> str:
        return {
            AccountStatus.AVAILABLE: "Cloud sync available",
            AccountStatus.NO_ACCOUNT: "No cloud account configured",
            AccountStatus.RESTRICTED: "Cloud access restricted",
            AccountStatus.UNKNOWN: "Cloud status unknown",
            AccountStatus.TEMPORARILY_UNAVAILABLE: "Cloud temporarily unavailable",
        }[self]


class SyncState(Enum):
    """How a reconciliation attempt ended."""

    SUCCESS = "success"
    FAILED = "failed"
    IN_PROGRESS = "in_progress"  # Rejected: another sync was running
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class SyncSummary:
    """Counts describing what a reconciliation changed."""

    downloaded: int = 0
    duplicates_removed: int = 0  # Remote records already known locally
    local_only: int = 0  # Known locally, absent remotely; left alone


@dataclass
class ReconcileOutcome:
    """Result of a reconciliation attempt.

    ``entries`` is the list the owner should hold afterwards: the merged
    list on success, the untouched local list otherwise.
    """

    state: SyncState
    message: str
    entries: list[ElevatorEntry] = field(default_factory=list)
    summary: SyncSummary = field(default_factory=SyncSummary)
    error_kind: RemoteErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.state is SyncState.SUCCESS


@dataclass(frozen=True)
class PushResult:
    """Result of propagating one local change to the remote store."""

    operation: str  # "save" or "delete"
    entry_id: str
    ok: bool
    attempts: int
    error: str | None = None
    error_kind: RemoteErrorKind | None = None
    cancelled: bool = False
