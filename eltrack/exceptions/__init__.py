"""Custom exceptions for ElTrack."""

from .base import ElTrackException
from .remote import RemoteError, RemoteErrorKind
from .storage import EntryParseError, LocalIOError
from .validation import ValidationError

__all__ = [
    "ElTrackException",
    "LocalIOError",
    "EntryParseError",
    "RemoteError",
    "RemoteErrorKind",
    "ValidationError",
]
