"""Local persistence and record parsing exceptions."""

from .base import ElTrackException


class LocalIOError(ElTrackException):
    """Raised when the persisted entry blob is missing or corrupt."""

    pass


class EntryParseError(ElTrackException):
    """Raised when a stored or remote record cannot be turned into an entry."""

    pass
