"""Base exception classes for ElTrack."""


class ElTrackException(Exception):
    """Base exception for all ElTrack errors.

    All custom exceptions in the eltrack package should inherit
    from this base class for consistent error handling.
    """

    pass
