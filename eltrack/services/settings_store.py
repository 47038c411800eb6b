"""JSON-file-backed key-value settings store."""

import json
import logging
import os
import tempfile
from pathlib import Path

from eltrack.exceptions import LocalIOError

logger = logging.getLogger(__name__)


class JsonSettingsStore:
    """Durable key-value slots kept together in one JSON object file.

    Every write replaces the file atomically (temp file + rename), so a
    reader never sees a half-written slot.
    """

    def __init__(self, path: Path):
        """Initialize the settings store.

        Args:
            path: Path to the JSON settings file (created on first write)
        """
        self.path = Path(path)

    def get(self, key: str) -> str | None:
        """Return the blob stored under key, or None if absent.

        Raises:
            LocalIOError: If the settings file exists but cannot be read
        """
        value = self._read_all().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise LocalIOError(f"Settings slot {key!r} does not hold text")
        return value

    def set(self, key: str, value: str) -> None:
        """Replace the blob stored under key.

        Raises:
            LocalIOError: If the settings file cannot be written
        """
        try:
            data = self._read_all()
        except LocalIOError as e:
            logger.warning(f"Discarding unreadable settings file {self.path}: {e}")
            data = {}
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        """Remove key if present."""
        try:
            data = self._read_all()
        except LocalIOError:
            return
        if key in data:
            del data[key]
            self._write_all(data)

    def keys(self) -> list[str]:
        """List stored keys (empty if the file is missing or unreadable)."""
        try:
            return list(self._read_all())
        except LocalIOError:
            return []

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            raise LocalIOError(f"Cannot read settings file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise LocalIOError(f"Settings file {self.path} is not a JSON object")
        return data

    def _write_all(self, data: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise LocalIOError(f"Cannot write settings file {self.path}: {e}") from e


class MemorySettingsStore:
    """Volatile key-value slots (for tests and previews)."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._slots: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._slots.get(key)

    def set(self, key: str, value: str) -> None:
        self._slots[key] = value

    def remove(self, key: str) -> None:
        self._slots.pop(key, None)
