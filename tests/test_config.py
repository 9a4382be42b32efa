"""
Tests for configuration loading.
"""

import pytest
from pathlib import Path

from hevy_metrics.config import AppConfig, HevyConfig, PathConfig
from hevy_metrics.errors import MissingCredentialError


class TestHevyConfig:
    """Tests for HevyConfig."""

    def test_from_env(self, monkeypatch):
        """Test key, base URL and timeout are read from the environment."""
        monkeypatch.setenv("HEVY_API_KEY", "abc")
        monkeypatch.setenv("HEVY_API_BASE", "https://example.test/v1/")
        monkeypatch.setenv("HEVY_TIMEOUT", "5")

        config = HevyConfig.from_env()

        assert config.api_key == "abc"
        assert config.api_base == "https://example.test/v1"
        assert config.timeout == 5.0

    def test_missing_key(self, monkeypatch):
        """Test a missing key raises MissingCredentialError."""
        monkeypatch.delenv("HEVY_API_KEY", raising=False)

        with pytest.raises(MissingCredentialError):
            HevyConfig.from_env()

    @pytest.mark.parametrize("timeout", ["0", "-5", "nan", "inf"])
    def test_rejects_bad_timeout(self, monkeypatch, timeout):
        """Test non-positive or non-finite timeouts are rejected."""
        monkeypatch.setenv("HEVY_API_KEY", "abc")
        monkeypatch.setenv("HEVY_TIMEOUT", timeout)

        with pytest.raises(ValueError, match="HEVY_TIMEOUT"):
            HevyConfig.from_env()


class TestAppConfig:
    """Tests for AppConfig."""

    def test_load_without_key(self, monkeypatch):
        """Test loading succeeds without a key but require_hevy fails."""
        monkeypatch.delenv("HEVY_API_KEY", raising=False)
        monkeypatch.delenv("HEVY_TIMEZONE", raising=False)

        config = AppConfig.load()

        assert config.hevy is None
        assert str(config.display.timezone) == "America/Lima"
        with pytest.raises(MissingCredentialError):
            config.require_hevy()

    def test_default_paths(self, monkeypatch, tmp_path):
        """Test output files live under .metrics in the working directory."""
        monkeypatch.delenv("HEVY_METRICS_DIR", raising=False)
        monkeypatch.chdir(tmp_path)

        paths = PathConfig.default()

        assert paths.metrics_dir == tmp_path / ".metrics"
        assert paths.workouts_file.name == "workouts_data.txt"
        assert paths.count_file.name == "workouts_count.txt"

    def test_metrics_dir_override(self, monkeypatch):
        """Test HEVY_METRICS_DIR replaces the default directory."""
        monkeypatch.setenv("HEVY_METRICS_DIR", "/var/lib/hevy")

        assert PathConfig.default().metrics_dir == Path("/var/lib/hevy")
