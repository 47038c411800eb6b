"""Local persistence of the ride list in a settings slot."""

import json
import logging
from collections.abc import Iterable

from eltrack.exceptions import EntryParseError, LocalIOError
from eltrack.interfaces import SettingsStore
from eltrack.models import ElevatorEntry

logger = logging.getLogger(__name__)

DEFAULT_ENTRIES_KEY = "ElevatorEntries"


def serialize(entries: Iterable[ElevatorEntry]) -> str:
    """Encode entries as a JSON array in list order."""
    return json.dumps([entry.to_dict() for entry in entries], ensure_ascii=False)


def deserialize(blob: str | bytes | None) -> list[ElevatorEntry]:
    """Decode a JSON array produced by :func:`serialize`.

    Corrupt input yields an empty list; a blob with any unreadable record
    is treated as corrupt as a whole.
    """
    if not blob:
        return []
    try:
        data = json.loads(blob)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as e:
        logger.warning(f"Stored ride list is not valid JSON, ignoring it: {e}")
        return []
    if not isinstance(data, list):
        logger.warning("Stored ride list is not a JSON array, ignoring it")
        return []
    try:
        return [ElevatorEntry.from_dict(item) for item in data]
    except EntryParseError as e:
        logger.warning(f"Stored ride list is corrupt, ignoring it: {e}")
        return []


class LocalStore:
    """Offline source of truth for the ride list.

    Reads and writes always cover the whole collection. Neither operation
    raises: a missing or corrupt slot loads as no data, and failed writes
    are logged and reported through the return value.
    """

    def __init__(self, settings: SettingsStore, key: str = DEFAULT_ENTRIES_KEY):
        """Initialize the local store.

        Args:
            settings: Key-value store holding the serialized list
            key: Name of the slot the list lives in
        """
        self.settings = settings
        self.key = key

    def load(self) -> list[ElevatorEntry]:
        """Load the persisted rides (empty on missing or corrupt data)."""
        try:
            blob = self.settings.get(self.key)
        except LocalIOError as e:
            logger.warning(f"Could not read local rides: {e}")
            return []
        return deserialize(blob)

    def save(self, entries: Iterable[ElevatorEntry]) -> bool:
        """Overwrite the persisted rides with entries.

        Returns:
            True if the write succeeded, False otherwise
        """
        try:
            self.settings.set(self.key, serialize(entries))
        except (LocalIOError, TypeError, ValueError) as e:
            logger.warning(f"Could not save local rides: {e}")
            return False
        return True

    def clear(self) -> None:
        """Remove the persisted slot."""
        try:
            self.settings.remove(self.key)
        except LocalIOError as e:
            logger.warning(f"Could not clear local rides: {e}")
