"""Configuration classes for ElTrack."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ElTrackConfig:
    """Immutable configuration for ride tracking and cloud sync.

    All configuration is frozen (immutable) so it can be shared between
    the owning RideLog and background sync workers without copying.
    """

    # Local storage settings
    data_dir: Path = field(default_factory=lambda: Path.home() / ".eltrack")
    settings_file: str = "settings.json"
    entries_key: str = "ElevatorEntries"

    # Remote record service settings
    remote_url: str = ""  # Empty = sync disabled
    remote_token: str = ""
    remote_record_type: str = "ElevatorEntry"
    remote_timeout: float = 15.0  # Seconds per HTTP call

    # Retry settings for remote pushes
    retry_max_attempts: int = 4
    retry_base_delay: float = 1.0  # Seconds, doubled on each attempt
    retry_max_delay: float = 30.0
    push_workers: int = 2

    # Sync behaviour
    sync_on_startup: bool = True

    # Export settings
    export_dir: Path | None = None  # None = current working directory

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.data_dir, str):
            object.__setattr__(self, "data_dir", Path(self.data_dir))
        if isinstance(self.export_dir, str):
            object.__setattr__(
                self, "export_dir", Path(self.export_dir) if self.export_dir else None
            )
        if self.retry_max_attempts < 1:
            raise ValueError("retry_max_attempts must be at least 1")

    @property
    def settings_path(self) -> Path:
        """Full path of the key-value settings file."""
        return self.data_dir / self.settings_file

    @property
    def remote_configured(self) -> bool:
        """Whether a remote record service has been set up."""
        return bool(self.remote_url.strip())
