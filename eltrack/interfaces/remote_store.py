"""Protocol for cloud record storage backends."""

from typing import Protocol

from eltrack.models import AccountStatus, ElevatorEntry


class RemoteStore(Protocol):
    """Interface for a cloud record database holding one record per entry.

    Any backend (HTTP record service, in-memory store for tests, etc.)
    implements this protocol to take part in sync.
    """

    def fetch_all(self) -> list[ElevatorEntry]:
        """Fetch every entry record.

        Malformed records are dropped rather than failing the fetch.

        Raises:
            RemoteError: If the backend call fails
        """
        ...

    def save(self, entry: ElevatorEntry) -> None:
        """Upsert one entry keyed by its id.

        Raises:
            RemoteError: If the backend rejects the record
        """
        ...

    def delete(self, entry_id: str) -> None:
        """Delete the record for an entry id.

        Raises:
            RemoteError: With kind NOT_FOUND if no such record exists
        """
        ...

    def account_status(self) -> AccountStatus:
        """Report whether the cloud account is usable (advisory only)."""
        ...
