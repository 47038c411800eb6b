"""Protocol for simple durable key-value settings storage."""

from typing import Protocol


class SettingsStore(Protocol):
    """Interface for a key-value slot store (the device's settings store).

    Values are opaque text blobs; each ``set`` replaces the whole slot.
    """

    def get(self, key: str) -> str | None:
        """Return the blob stored under key, or None if absent.

        Raises:
            LocalIOError: If the backing storage cannot be read
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Replace the blob stored under key.

        Raises:
            LocalIOError: If the backing storage cannot be written
        """
        ...

    def remove(self, key: str) -> None:
        """Remove key if present."""
        ...
