"""Data model for recorded elevator rides."""

import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from eltrack.exceptions import EntryParseError

FREQUENT_ELEVATOR_CODES = frozenset({"H1", "H2", "H3", "SE1"})


class ElevatorType(Enum):
    """Elevators a ride can be recorded against (value = canonical code)."""

    H1 = "H1"
    H2 = "H2"
    H3 = "H3"
    SE1 = "SE1"
    H4 = "H4"
    SE2 = "SE2"
    F1 = "F1"
    P1 = "P1"

    @property
    def is_frequent(self) -> bool:
        """Display hint: shown in the primary picker grid."""
        return self.value in FREQUENT_ELEVATOR_CODES

    @classmethod
    def frequent(cls) -> list["ElevatorType"]:
        return [e for e in cls if e.is_frequent]

    @classmethod
    def others(cls) -> list["ElevatorType"]:
        return [e for e in cls if not e.is_frequent]

    @classmethod
    def from_code(cls, code: str) -> "ElevatorType":
        """Look up an elevator by its canonical code (case-insensitive).

        Raises:
            ValueError: If the code is unknown
        """
        try:
            return cls(code.strip().upper())
        except (AttributeError, ValueError) as e:
            raise ValueError(f"Unknown elevator code: {code!r}") from e


class FloorOption(Enum):
    """Canonical floor choices offered when recording a ride."""

    FLOOR_75 = "75"
    FLOOR_48 = "48"
    FLOOR_16 = "16"
    FLOOR_14 = "14"
    FLOOR_8 = "8"
    FLOOR_7 = "7"
    LOBBY = "L"
    OTHER = "Other"

    @property
    def display_name(self) -> str:
        if self is FloorOption.LOBBY:
            return "Lobby (L)"
        if self is FloorOption.OTHER:
            return "Other"
        return f"Floor {self.value}"

    @classmethod
    def resolve(cls, label: str) -> "FloorOption":
        """Map a stored floor label to its option; free-typed labels map to OTHER."""
        for option in cls:
            if option is not cls.OTHER and option.value == label:
                return option
        return cls.OTHER


def _coerce_id(value: Any) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError) as e:
        raise EntryParseError(f"Invalid entry id: {value!r}") from e


def _coerce_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        ts = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            ts = datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise EntryParseError(f"Invalid timestamp: {value!r}") from e
    elif isinstance(value, str):
        try:
            ts = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as e:
            raise EntryParseError(f"Invalid timestamp: {value!r}") from e
    else:
        raise EntryParseError(f"Invalid timestamp: {value!r}")
    # Naive values are wall-clock local time
    if ts.tzinfo is None:
        try:
            ts = ts.astimezone()
        except (OverflowError, OSError, ValueError) as e:
            raise EntryParseError(f"Invalid timestamp: {value!r}") from e
    return ts


@dataclass(frozen=True, eq=False)
class ElevatorEntry:
    """A single recorded elevator ride.

    Entries are immutable once created. Equality and hashing use ``id``
    only, which is also the merge key between local and remote storage.
    """

    starting_floor: str
    ending_floor: str
    elevator: ElevatorType
    id: uuid.UUID
    timestamp: datetime

    def __post_init__(self):
        """Coerce string ids, ISO timestamps and elevator codes."""
        object.__setattr__(self, "id", _coerce_id(self.id))
        object.__setattr__(self, "timestamp", _coerce_timestamp(self.timestamp))
        if not isinstance(self.elevator, ElevatorType):
            try:
                object.__setattr__(self, "elevator", ElevatorType.from_code(self.elevator))
            except ValueError as e:
                raise EntryParseError(str(e)) from e

    @classmethod
    def create(
        cls,
        starting_floor: str,
        ending_floor: str,
        elevator: ElevatorType,
        now: datetime | None = None,
    ) -> "ElevatorEntry":
        """Record a new ride with a fresh id and the current time."""
        return cls(
            starting_floor=starting_floor,
            ending_floor=ending_floor,
            elevator=elevator,
            id=uuid.uuid4(),
            timestamp=now or datetime.now(timezone.utc),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElevatorEntry):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"{self.starting_floor} -> {self.ending_floor} ({self.elevator.value})"

    @property
    def record_name(self) -> str:
        """The id rendered in its canonical string form."""
        return str(self.id)

    @property
    def formatted_date(self) -> str:
        """Medium-style local date, e.g. ``Jan 5, 2025``."""
        local = self.timestamp.astimezone()
        return f"{local:%b} {local.day}, {local.year}"

    @property
    def formatted_time(self) -> str:
        """Medium-style local time, e.g. ``3:04:05 PM``."""
        local = self.timestamp.astimezone()
        hour = local.hour % 12 or 12
        return f"{hour}:{local:%M:%S %p}"

    def has_same_floors(self) -> bool:
        return self.starting_floor == self.ending_floor

    def to_dict(self) -> dict[str, str]:
        """Serialize to the fixed JSON field layout."""
        return {
            "id": str(self.id),
            "startingFloor": self.starting_floor,
            "endingFloor": self.ending_floor,
            "elevator": self.elevator.value,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "ElevatorEntry":
        """Rebuild an entry from :meth:`to_dict` output.

        Raises:
            EntryParseError: If a field is missing or cannot be parsed
        """
        if not isinstance(data, dict):
            raise EntryParseError(f"Entry record must be an object, got {type(data).__name__}")
        try:
            starting_floor = data["startingFloor"]
            ending_floor = data["endingFloor"]
            elevator = data["elevator"]
            entry_id = data["id"]
            timestamp = data["timestamp"]
        except KeyError as e:
            raise EntryParseError(f"Entry record missing field {e.args[0]!r}") from e
        if not isinstance(starting_floor, str) or not isinstance(ending_floor, str):
            raise EntryParseError("Floor labels must be strings")
        return cls(
            starting_floor=starting_floor,
            ending_floor=ending_floor,
            elevator=elevator,
            id=entry_id,
            timestamp=timestamp,
        )


def sort_most_recent_first(entries: Iterable[ElevatorEntry]) -> list[ElevatorEntry]:
    """Return entries ordered by timestamp, newest first."""
    return sorted(entries, key=lambda e: e.timestamp, reverse=True)
