"""Configuration management for ElTrack."""

from .config import ElTrackConfig
from .defaults import config_from_env, create_default_config

__all__ = ["ElTrackConfig", "create_default_config", "config_from_env"]
