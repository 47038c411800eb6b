"""Cloud record service exceptions."""

from enum import Enum

from .base import ElTrackException


class RemoteErrorKind(Enum):
    """Category of a remote store failure."""

    NOT_CONFIGURED = "notConfigured"
    QUOTA_EXCEEDED = "quotaExceeded"
    NOT_FOUND = "notFound"
    TRANSIENT = "transient"
    PARSE_FAILURE = "parseFailure"

    @property
    def retryable(self) -> bool:
        """Whether retrying later could succeed."""
        return self in (RemoteErrorKind.TRANSIENT, RemoteErrorKind.QUOTA_EXCEEDED)


class RemoteError(ElTrackException):
    """Raised when a call to the remote record service fails."""

    def __init__(self, kind: RemoteErrorKind, message: str = ""):
        self.kind = kind
        self.message = message or kind.value
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"RemoteError({self.kind.value!r}, {self.message!r})"
