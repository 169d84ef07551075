"""Agent settings — defaults overridable from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from depsentinel.exceptions import ConfigurationError

MAX_PATHS = 4096
DEFAULT_ARCHIVE_SUFFIX = ".jar"
# Dependency inventory is reported twice a day.
DEFAULT_SCAN_INTERVAL = 43200.0


def _env_int(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from exc


def _env_float(key: str, default: float) -> float:
    raw = os.environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    """Tunables for the dependency inventory."""

    max_paths: int = MAX_PATHS
    archive_suffix: str = DEFAULT_ARCHIVE_SUFFIX
    scan_interval: float = DEFAULT_SCAN_INTERVAL

    def __post_init__(self) -> None:
        if self.max_paths <= 0:
            raise ConfigurationError(f"max_paths must be positive, got {self.max_paths}")
        if not self.archive_suffix:
            raise ConfigurationError("archive_suffix must not be empty")
        if self.scan_interval <= 0:
            raise ConfigurationError(
                f"scan_interval must be positive, got {self.scan_interval}"
            )

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from environment variables.

        Reads:
            DEPSENTINEL_MAX_PATHS       — registry capacity (default: 4096)
            DEPSENTINEL_ARCHIVE_SUFFIX  — archive file extension (default: .jar)
            DEPSENTINEL_SCAN_INTERVAL   — seconds between periodic scans (default: 43200)
        """
        return cls(
            max_paths=_env_int("DEPSENTINEL_MAX_PATHS", MAX_PATHS),
            archive_suffix=os.environ.get("DEPSENTINEL_ARCHIVE_SUFFIX") or DEFAULT_ARCHIVE_SUFFIX,
            scan_interval=_env_float("DEPSENTINEL_SCAN_INTERVAL", DEFAULT_SCAN_INTERVAL),
        )
