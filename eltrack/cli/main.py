"""Main CLI entry point for eltrack."""

import argparse
import sys

from eltrack import __version__
from eltrack.cli.commands import export, history, record, sync
from eltrack.cli.commands.common import configure_logging
from eltrack.models import ElevatorType


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="eltrack",
        description="Track elevator rides, export them as CSV and sync them to the cloud",
        epilog="Use 'eltrack <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--data-dir", help="Directory holding settings.json (default ~/.eltrack)")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Ignore any configured cloud service for this run",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # eltrack record <start> <end> <elevator>
    record_parser = subparsers.add_parser(
        "record",
        help="Record an elevator ride",
        description="Record a ride from one floor to another",
    )
    record_parser.add_argument("start", help="Starting floor (e.g. 75, L)")
    record_parser.add_argument("end", help="Ending floor")
    record_parser.add_argument(
        "elevator",
        help=f"Elevator code ({', '.join(e.value for e in ElevatorType)})",
    )

    # eltrack history
    history_parser = subparsers.add_parser("history", help="List recorded rides")
    history_parser.add_argument("--limit", type=int, default=0, help="Show at most N rides")

    # eltrack delete <id>
    delete_parser = subparsers.add_parser("delete", help="Delete one ride")
    delete_parser.add_argument("id", help="Ride id (a unique prefix is enough)")

    # eltrack clear --yes
    clear_parser = subparsers.add_parser("clear", help="Delete all rides")
    clear_parser.add_argument("--yes", action="store_true", help="Confirm deletion")

    # eltrack export
    export_parser = subparsers.add_parser(
        "export",
        help="Export rides as CSV",
        description="Write the ride history to a CSV file named after its date range",
    )
    export_parser.add_argument("-o", "--output", help="Directory to write the CSV file into")
    export_parser.add_argument(
        "--stdout", action="store_true", help="Print the CSV instead of writing a file"
    )

    # eltrack sync
    sync_parser = subparsers.add_parser("sync", help="Download rides from the cloud")
    sync_parser.add_argument(
        "--push", action="store_true", help="Also upload every local ride"
    )

    # eltrack status
    subparsers.add_parser("status", help="Show local and cloud status")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    # Dispatch to appropriate command
    if args.command == "record":
        return record.record_command(args)
    elif args.command == "history":
        return history.history_command(args)
    elif args.command == "delete":
        return history.delete_command(args)
    elif args.command == "clear":
        return history.clear_command(args)
    elif args.command == "export":
        return export.export_command(args)
    elif args.command == "sync":
        return sync.sync_command(args)
    elif args.command == "status":
        return sync.status_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
