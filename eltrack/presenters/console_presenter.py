"""Console presenter for CLI output."""

from eltrack.models import AccountStatus, ElevatorEntry, ReconcileOutcome


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_entries(self, entries: list[ElevatorEntry]) -> None:
        """Display the ride history."""
        if not entries:
            print("No Rides Recorded")
            return

        print(f"\nRide History ({len(entries)} rides):")
        print("=" * 72)
        for entry in entries:
            print(
                f"{entry.formatted_date:>13s} {entry.formatted_time:>11s}  "
                f"{entry.starting_floor:>5s} -> {entry.ending_floor:<5s} "
                f"{entry.elevator.value:<4s} {entry.id}"
            )

    def show_sync_outcome(self, outcome: ReconcileOutcome) -> None:
        """Display the result of a sync attempt."""
        if not outcome.ok:
            print(f"[WARN] {outcome.message}")
            return

        print("\nSync Complete:")
        print(f"  Downloaded: {outcome.summary.downloaded}")
        print(f"  Already present: {outcome.summary.duplicates_removed}")
        print(f"  Only on this device: {outcome.summary.local_only}")
        print(f"  Total rides: {len(outcome.entries)}")

    def show_account_status(self, status: AccountStatus) -> None:
        """Display the cloud account status."""
        marker = "[OK]" if status is AccountStatus.AVAILABLE else "[WARN]"
        print(f"{marker} {status.description}")
