"""CLI commands for cloud sync."""

from eltrack.presenters import ConsolePresenter

from .common import flush_pushes, open_ride_log


def sync_command(args) -> int:
    """Execute the sync subcommand.

    Downloads rides missing locally; with --push also uploads every local
    ride (uploads are idempotent upserts).
    """
    presenter = ConsolePresenter()
    config, ride_log = open_ride_log(args)
    try:
        if ride_log.reconciler is None:
            presenter.show_error("Cloud sync is not configured (set ELTRACK_REMOTE_URL)")
            return 1

        outcome = ride_log.sync()
        presenter.show_sync_outcome(outcome)
        if args.push:
            queued = ride_log.push_all()
            presenter.show_info(f"Uploading {queued} rides...")
            flush_pushes(ride_log, config, presenter)
    finally:
        ride_log.close()
    return 0 if outcome.ok else 1


def status_command(args) -> int:
    """Execute the status subcommand."""
    presenter = ConsolePresenter()
    config, ride_log = open_ride_log(args)
    try:
        presenter.show_info(f"Rides stored locally: {len(ride_log)}")
        presenter.show_info(f"Data file: {config.settings_path}")
        if ride_log.reconciler is None:
            presenter.show_warning("Cloud sync is not configured")
        else:
            presenter.show_account_status(ride_log.reconciler.remote.account_status())
    finally:
        ride_log.close()
    return 0
