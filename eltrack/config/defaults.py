"""Default configuration values for ElTrack."""

import os
from collections.abc import Mapping

from .config import ElTrackConfig

ENV_DATA_DIR = "ELTRACK_DATA_DIR"
ENV_REMOTE_URL = "ELTRACK_REMOTE_URL"
ENV_REMOTE_TOKEN = "ELTRACK_REMOTE_TOKEN"


def create_default_config(**overrides) -> ElTrackConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        ElTrackConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            remote_url="https://records.example.com",
            retry_max_attempts=2
        )
    """
    return ElTrackConfig(**overrides)


def config_from_env(environ: Mapping[str, str] | None = None, **overrides) -> ElTrackConfig:
    """Create a configuration from ELTRACK_* environment variables.

    Explicit overrides win over environment values.

    Args:
        environ: Environment mapping (defaults to os.environ)
        **overrides: Keyword arguments to override values

    Returns:
        ElTrackConfig with environment values and overrides applied
    """
    env = os.environ if environ is None else environ
    values: dict = {}
    if env.get(ENV_DATA_DIR):
        values["data_dir"] = env[ENV_DATA_DIR]
    if env.get(ENV_REMOTE_URL):
        values["remote_url"] = env[ENV_REMOTE_URL]
    if env.get(ENV_REMOTE_TOKEN):
        values["remote_token"] = env[ENV_REMOTE_TOKEN]
    values.update(overrides)
    return create_default_config(**values)
