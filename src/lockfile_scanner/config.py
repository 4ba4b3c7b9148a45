"""Configuration loader for the lock file scanner.

Settings are optional: without a configuration file the scanner uses its
built-in defaults. A JSON file may override them::

    {
      "skipDirectories": ["node_modules", ".git", "vendor"],
      "reportFilename": "lock-files-report.json",
      "warnOnly": false
    }

As with the rest of the package, validation is done by hand and failures raise
``ConfigError``.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .discovery import SKIP_DIRS
from .report import LOCK_FILES_REPORT_FILENAME

CONFIG_PATH_ENV_VAR = "LOCKFILE_SCANNER_CONFIG"
WARN_ONLY_ENV_VAR = "LOCKFILE_SCANNER_WARN_ONLY"

_TRUTHY = {"1", "true", "yes", "y"}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    skip_directories: frozenset[str] = SKIP_DIRS
    report_filename: str = LOCK_FILES_REPORT_FILENAME
    warn_only: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from a dictionary, validating each known field."""
        skip = data.get("skipDirectories", sorted(SKIP_DIRS))
        if not isinstance(skip, list) or not all(isinstance(s, str) and s for s in skip):
            raise ConfigError("'skipDirectories' must be an array of non-empty strings")

        report_filename = data.get("reportFilename", LOCK_FILES_REPORT_FILENAME)
        if not isinstance(report_filename, str) or not report_filename:
            raise ConfigError("'reportFilename' must be a non-empty string")
        if os.path.basename(report_filename) != report_filename:
            raise ConfigError("'reportFilename' must be a file name, not a path")

        warn_only = data.get("warnOnly", False)
        if not isinstance(warn_only, bool):
            raise ConfigError("'warnOnly' must be a boolean")

        return cls(
            skip_directories=frozenset(skip),
            report_filename=report_filename,
            warn_only=warn_only,
        )


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. LOCKFILE_SCANNER_CONFIG environment variable
    3. None (built-in defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def _warn_only_from_env() -> bool:
    return os.environ.get(WARN_ONLY_ENV_VAR, "").strip().lower() in _TRUTHY


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings.

    Args:
        path: Optional path to a JSON config file. If not provided, uses the
            LOCKFILE_SCANNER_CONFIG env var or falls back to the defaults.

    Returns:
        A Settings object. LOCKFILE_SCANNER_WARN_ONLY forces ``warn_only``.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)

    if config_path is None:
        settings = Settings()
    else:
        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            content = config_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to read configuration file: {exc}") from exc

        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a JSON object")

        settings = Settings.from_dict(data)

    if _warn_only_from_env():
        settings = replace(settings, warn_only=True)

    return settings
