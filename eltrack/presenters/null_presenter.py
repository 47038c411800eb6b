"""Null presenter for testing (no output)."""

from eltrack.models import AccountStatus, ElevatorEntry, ReconcileOutcome


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_entries(self, entries: list[ElevatorEntry]) -> None:
        """Display the ride history (no-op)."""
        pass

    def show_sync_outcome(self, outcome: ReconcileOutcome) -> None:
        """Display the result of a sync attempt (no-op)."""
        pass

    def show_account_status(self, status: AccountStatus) -> None:
        """Display the cloud account status (no-op)."""
        pass
