"""Presenter protocol for output abstraction."""

from typing import Protocol

from eltrack.models import AccountStatus, ElevatorEntry, ReconcileOutcome


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, GUI, etc).

    This protocol abstracts all output operations, allowing the same
    ride log to work with different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_entries(self, entries: list[ElevatorEntry]) -> None:
        """Display the ride history.

        Args:
            entries: Entries to list, most recent first
        """
        ...

    def show_sync_outcome(self, outcome: ReconcileOutcome) -> None:
        """Display the result of a sync attempt.

        Args:
            outcome: The reconciliation outcome to display
        """
        ...

    def show_account_status(self, status: AccountStatus) -> None:
        """Display the cloud account status.

        Args:
            status: Advisory account status
        """
        ...
