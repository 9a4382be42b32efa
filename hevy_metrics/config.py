"""Configuration management for Hevy metrics."""

import math
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from .errors import MissingCredentialError


# load environment variables from .env file
load_dotenv()


DEFAULT_API_BASE = "https://api.hevyapp.com/v1"
DEFAULT_TIMEZONE = "America/Lima"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class HevyConfig:
    """Hevy API configuration settings."""

    api_key: str
    api_base: str = DEFAULT_API_BASE
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "HevyConfig":
        """
        Create config from environment variables.
        """
        api_key = os.getenv("HEVY_API_KEY")
        if not api_key:
            raise MissingCredentialError("Missing HEVY_API_KEY in .env")

        raw_timeout = os.getenv("HEVY_TIMEOUT")
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        if not math.isfinite(timeout) or timeout <= 0:
            raise ValueError(f"HEVY_TIMEOUT must be a positive number: {raw_timeout!r}")

        return cls(
            api_key=api_key,
            api_base=os.getenv("HEVY_API_BASE", DEFAULT_API_BASE).rstrip("/"),
            timeout=timeout,
        )


@dataclass(frozen=True)
class PathConfig:
    """File path configuration."""

    metrics_dir: Path

    @property
    def workouts_file(self) -> Path:
        """Append-only log of formatted workouts."""
        return self.metrics_dir / "workouts_data.txt"

    @property
    def count_file(self) -> Path:
        """Snapshot of the total workout count."""
        return self.metrics_dir / "workouts_count.txt"

    @classmethod
    def default(cls) -> "PathConfig":
        """
        Create default path configuration.

        The metrics directory lives under the current working directory
        unless HEVY_METRICS_DIR points elsewhere.
        """
        metrics_dir = os.getenv("HEVY_METRICS_DIR")
        if metrics_dir:
            return cls(metrics_dir=Path(metrics_dir))
        return cls(metrics_dir=Path.cwd() / ".metrics")


@dataclass(frozen=True)
class DisplayConfig:
    """Timestamp rendering settings."""

    timezone: ZoneInfo

    @classmethod
    def from_env(cls) -> "DisplayConfig":
        """
        Create display config, validating the configured timezone name.
        """
        name = os.getenv("HEVY_TIMEZONE", DEFAULT_TIMEZONE)
        try:
            return cls(timezone=ZoneInfo(name))
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone in HEVY_TIMEZONE: {name!r}") from e


@dataclass(frozen=True)
class AppConfig:
    """Application-wide configuration."""

    hevy: Optional[HevyConfig]
    paths: PathConfig
    display: DisplayConfig

    @classmethod
    def load(cls) -> "AppConfig":
        """
        Load full application configuration.

        A missing API key is not an error here; commands that talk to
        the API raise MissingCredentialError themselves.
        """
        try:
            hevy = HevyConfig.from_env()
        except MissingCredentialError:
            hevy = None

        return cls(hevy=hevy, paths=PathConfig.default(), display=DisplayConfig.from_env())

    def require_hevy(self) -> HevyConfig:
        """Return the API config or fail if no key is configured."""
        if self.hevy is None:
            raise MissingCredentialError("Missing HEVY_API_KEY in .env")
        return self.hevy
