"""CLI command for exporting rides as CSV."""

import sys
from pathlib import Path

from eltrack.presenters import ConsolePresenter

from .common import open_ride_log


def export_command(args) -> int:
    """Execute the export subcommand.

    Writes the CSV to stdout with --stdout, otherwise into --output (or the
    configured export directory, or the current directory).
    """
    presenter = ConsolePresenter()
    config, ride_log = open_ride_log(args)
    try:
        if args.stdout:
            sys.stdout.write(ride_log.export_csv())
            return 0

        directory = Path(args.output) if args.output else (config.export_dir or Path.cwd())
        try:
            path = ride_log.export_service.export_file(ride_log.entries, directory)
        except OSError as e:
            presenter.show_error(f"Could not write export: {e}")
            return 1
        presenter.show_success(f"Exported {len(ride_log)} rides to {path}")
    finally:
        ride_log.close()
    return 0
