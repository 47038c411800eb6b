"""Tests for configuration module."""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from eltrack.config import ElTrackConfig, config_from_env, create_default_config


class TestElTrackConfig:
    """Tests for ElTrackConfig."""

    def test_defaults(self):
        config = ElTrackConfig()
        assert config.data_dir == Path.home() / ".eltrack"
        assert config.entries_key == "ElevatorEntries"
        assert config.remote_url == ""
        assert not config.remote_configured
        assert config.retry_max_attempts == 4
        assert config.export_dir is None

    def test_string_paths_are_coerced(self, tmp_path):
        config = ElTrackConfig(data_dir=str(tmp_path), export_dir=str(tmp_path / "out"))
        assert isinstance(config.data_dir, Path)
        assert config.export_dir == tmp_path / "out"
        assert config.settings_path == tmp_path / "settings.json"

    def test_empty_export_dir_means_none(self):
        assert ElTrackConfig(export_dir="").export_dir is None

    def test_frozen(self):
        config = ElTrackConfig()
        with pytest.raises(FrozenInstanceError):
            config.remote_url = "https://example.com"  # type: ignore[misc]

    def test_retry_attempts_must_be_positive(self):
        with pytest.raises(ValueError, match="retry_max_attempts"):
            ElTrackConfig(retry_max_attempts=0)

    def test_blank_remote_url_is_not_configured(self):
        assert not ElTrackConfig(remote_url="   ").remote_configured
        assert ElTrackConfig(remote_url="https://records.test").remote_configured


class TestFactories:
    """Tests for create_default_config and config_from_env."""

    def test_create_default_config_overrides(self):
        config = create_default_config(retry_max_attempts=2, push_workers=4)
        assert config.retry_max_attempts == 2
        assert config.push_workers == 4

    def test_config_from_env(self, tmp_path):
        env = {
            "ELTRACK_DATA_DIR": str(tmp_path),
            "ELTRACK_REMOTE_URL": "https://records.test",
            "ELTRACK_REMOTE_TOKEN": "secret",
        }
        config = config_from_env(env)
        assert config.data_dir == tmp_path
        assert config.remote_url == "https://records.test"
        assert config.remote_token == "secret"

    def test_overrides_beat_environment(self):
        env = {"ELTRACK_REMOTE_URL": "https://records.test"}
        assert config_from_env(env, remote_url="").remote_url == ""

    def test_empty_environment_gives_defaults(self):
        assert config_from_env({}) == ElTrackConfig()
