"""CLI command for recording a ride."""

from eltrack.exceptions import ValidationError
from eltrack.presenters import ConsolePresenter
from eltrack.services import ValidationService

from .common import flush_pushes, open_ride_log


def record_command(args) -> int:
    """Execute the record subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()

    try:
        elevator = ValidationService().require_valid(args.start, args.end, args.elevator)
    except ValidationError as e:
        presenter.show_error(str(e))
        return 1

    config, ride_log = open_ride_log(args)
    try:
        entry = ride_log.add_entry(args.start.strip(), args.end.strip(), elevator)
        presenter.show_success(
            f"Your elevator ride from {entry.starting_floor} to {entry.ending_floor} "
            f"in elevator {entry.elevator.value} has been recorded."
        )
        flush_pushes(ride_log, config, presenter)
    finally:
        ride_log.close()
    return 0
