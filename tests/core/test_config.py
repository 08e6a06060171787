"""Tests for configuration management."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

import ticker_worker.core.config as config_module
from ticker_worker.core.config import ConfigError, ConfigLoader, get_config

EXPECTED_INTERVAL = "0.001"
EXPECTED_RETRIES = 5
EXPECTED_BACKOFF = 2


class TestConfigLoader:
    """Test suite for ConfigLoader."""

    def test_load_default_config(self) -> None:
        """Load the packaged settings with their built-in defaults."""
        loader = ConfigLoader()
        assert loader.get("environment") == "Production"
        assert loader.get("ticker.interval_seconds") == EXPECTED_INTERVAL
        assert loader.get("ticker.run_seconds") == ""

    def test_get_with_dot_notation(self, tmp_path: Path) -> None:
        """Read nested values with dot notation."""
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("""
ticker:
  interval_seconds: 0.5
environment: test
""")

        loader = ConfigLoader(config_dir=tmp_path)
        assert loader.get("ticker.interval_seconds") == 0.5
        assert loader.get("environment") == "test"

    def test_get_with_default(self, tmp_path: Path) -> None:
        """Return the default for missing keys."""
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("environment: test")

        loader = ConfigLoader(config_dir=tmp_path)
        assert loader.get("nonexistent.key", "default") == "default"
        assert loader.get("environment.nested", "default") == "default"

    def test_missing_settings_file_gives_empty_config(self, tmp_path: Path) -> None:
        """Treat a directory without settings.yaml as empty configuration."""
        loader = ConfigLoader(config_dir=tmp_path)
        assert loader.get("environment") is None
        assert loader.get_ticker_config() == {}

    def test_env_var_substitution(self, tmp_path: Path) -> None:
        """Substitute environment variables into config values."""
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("""
ticker:
  interval_seconds: ${TEST_TICKER_INTERVAL}
  run_seconds: ${TEST_TICKER_RUN:30}
""")

        with patch.dict(os.environ, {"TEST_TICKER_INTERVAL": "0.25"}):
            loader = ConfigLoader(config_dir=tmp_path)
            assert loader.get("ticker.interval_seconds") == "0.25"
            assert loader.get("ticker.run_seconds") == "30"

    def test_env_var_overrides_packaged_default(self) -> None:
        """Let TICKER_* variables override the packaged settings."""
        with patch.dict(os.environ, {"TICKER_ENVIRONMENT": "Staging"}):
            loader = ConfigLoader()
        assert loader.get("environment") == "Staging"

    def test_env_var_in_list(self, tmp_path: Path) -> None:
        """Substitute environment variables inside lists."""
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("""
tags:
  - ${TEST_TAG:worker}
  - static
""")

        loader = ConfigLoader(config_dir=tmp_path)
        assert loader.get("tags") == ["worker", "static"]

    def test_full_string_unresolved_env_var_raises_config_error(self, tmp_path: Path) -> None:
        """Raise ConfigError when env var is unset and has no default."""
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("""
ticker:
  interval_seconds: ${NONEXISTENT_TICKER_WORKER_VAR}
""")

        with pytest.raises(ConfigError, match="Required environment variable"):
            ConfigLoader(config_dir=tmp_path)

    def test_embedded_env_var_reference_raises_config_error(self, tmp_path: Path) -> None:
        """Raise ConfigError when an env var reference is embedded in a larger string."""
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("""
environment: prod-${NONEXISTENT_SUFFIX_VAR}
""")

        with pytest.raises(ConfigError, match="Unresolved environment variable reference"):
            ConfigLoader(config_dir=tmp_path)

    def test_deep_merge(self, tmp_path: Path) -> None:
        """Deep merge settings.local.yaml over settings.yaml."""
        base_config = tmp_path / "settings.yaml"
        base_config.write_text("""
ticker:
  interval_seconds: 1
  retry:
    max_attempts: 3
    backoff: 2
""")

        local_config = tmp_path / "settings.local.yaml"
        local_config.write_text("""
ticker:
  interval_seconds: 0.01
  retry:
    max_attempts: 5
""")

        loader = ConfigLoader(config_dir=tmp_path)
        assert loader.get("ticker.interval_seconds") == 0.01
        assert loader.get("ticker.retry.max_attempts") == EXPECTED_RETRIES
        assert loader.get("ticker.retry.backoff") == EXPECTED_BACKOFF

    def test_get_ticker_config_not_a_dict(self, tmp_path: Path) -> None:
        """Raise ConfigError when the ticker section is a scalar."""
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("ticker: fast")

        loader = ConfigLoader(config_dir=tmp_path)
        with pytest.raises(ConfigError, match="ticker config must be a dict"):
            loader.get_ticker_config()


class TestGetConfig:
    """Test suite for the lazy singleton get_config() function."""

    def test_returns_config_loader_instance(self) -> None:
        """Return a ConfigLoader instance on first call."""
        config_module._config = None
        try:
            result = get_config()
            assert isinstance(result, ConfigLoader)
        finally:
            config_module._config = None

    def test_returns_same_instance(self) -> None:
        """Return the same ConfigLoader on subsequent calls."""
        config_module._config = None
        try:
            first = get_config()
            second = get_config()
            assert first is second
        finally:
            config_module._config = None
