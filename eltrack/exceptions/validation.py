"""Validation-related exceptions."""

from .base import ElTrackException


class ValidationError(ElTrackException):
    """Raised when a ride fails caller-side validation."""

    pass
