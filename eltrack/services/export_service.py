"""Export service for ride history as CSV."""

import csv
import io
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from eltrack.models import ElevatorEntry

CSV_HEADER = ["Date", "Time", "Starting Floor", "Ending Floor", "Elevator"]
NO_DATA_ROW = ["No rides recorded", "", "", "", ""]
DEFAULT_FILENAME = "ElTrack_Export.csv"
FILENAME_PREFIX = "ElTrack"


def format_file_date(timestamp: datetime) -> str:
    """Format a timestamp's local date for filenames, e.g. ``Jan-5-2025``."""
    local = timestamp.astimezone()
    return f"{local:%b}-{local.day}-{local.year}"


class ExportService:
    """Render ride history to CSV text and files (stateless service)."""

    def to_csv(self, entries: Iterable[ElevatorEntry]) -> str:
        """Render entries as CSV, oldest ride first.

        Every field is quoted. An empty history renders the header plus a
        single "No rides recorded" row.

        Args:
            entries: Entries in any order

        Returns:
            CSV text with a trailing newline
        """
        rows = sorted(entries, key=lambda e: e.timestamp)

        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        if not rows:
            writer.writerow(NO_DATA_ROW)
        for entry in rows:
            writer.writerow(
                [
                    entry.formatted_date,
                    entry.formatted_time,
                    entry.starting_floor,
                    entry.ending_floor,
                    entry.elevator.value,
                ]
            )
        return buffer.getvalue()

    def filename_for(self, entries: Iterable[ElevatorEntry]) -> str:
        """Derive the export filename from the dates the entries cover.

        Returns:
            ``ElTrack_Export.csv`` for no entries, ``ElTrack_<date>.csv`` when
            all rides share a date, else ``ElTrack_<first>_to_<last>.csv``
        """
        timestamps = [e.timestamp for e in entries]
        if not timestamps:
            return DEFAULT_FILENAME

        first = format_file_date(min(timestamps))
        last = format_file_date(max(timestamps))
        if first == last:
            return f"{FILENAME_PREFIX}_{first}.csv"
        return f"{FILENAME_PREFIX}_{first}_to_{last}.csv"

    def export_file(self, entries: Iterable[ElevatorEntry], directory: Path) -> Path:
        """Write the CSV export into directory.

        Args:
            entries: Entries to export
            directory: Destination directory (created if missing)

        Returns:
            Path of the written file
        """
        entries = list(entries)
        directory.mkdir(parents=True, exist_ok=True)
        output_path = directory / self.filename_for(entries)
        with open(output_path, "w", newline="", encoding="utf-8") as f:
            f.write(self.to_csv(entries))
        return output_path
