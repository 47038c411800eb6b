"""CLI commands for browsing and deleting rides."""

from eltrack.presenters import ConsolePresenter

from .common import flush_pushes, open_ride_log


def history_command(args) -> int:
    """Execute the history subcommand."""
    presenter = ConsolePresenter()
    _config, ride_log = open_ride_log(args)
    try:
        entries = list(ride_log.entries)
        if args.limit:
            entries = entries[: args.limit]
        presenter.show_entries(entries)
    finally:
        ride_log.close()
    return 0


def delete_command(args) -> int:
    """Execute the delete subcommand (accepts a unique id prefix)."""
    presenter = ConsolePresenter()
    config, ride_log = open_ride_log(args)
    try:
        entry = ride_log.get(args.id)
        if entry is None:
            presenter.show_error(f"No ride matches id {args.id!r}")
            return 1
        ride_log.delete_entry(entry.record_name)
        presenter.show_success(f"Deleted ride {entry}")
        flush_pushes(ride_log, config, presenter)
    finally:
        ride_log.close()
    return 0


def clear_command(args) -> int:
    """Execute the clear subcommand."""
    presenter = ConsolePresenter()
    if not args.yes:
        presenter.show_warning(
            "This will permanently delete all elevator ride entries. "
            "Re-run with --yes to confirm."
        )
        return 1

    config, ride_log = open_ride_log(args)
    try:
        removed = ride_log.clear_all()
        presenter.show_success(f"Deleted {removed} rides")
        flush_pushes(ride_log, config, presenter)
    finally:
        ride_log.close()
    return 0
