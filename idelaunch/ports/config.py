"""Configuration source ports.

Defines the interfaces for reading launch overrides and user defaults.
"""

from pathlib import Path
from typing import Protocol

from idelaunch.domain.config import LaunchConfig


class OverrideSource(Protocol):
    """Key/value source for launch-time overrides (env var or project file)."""

    name: str

    def get(self, key: str) -> str | None:
        """Return the raw value for ``key``, or None when absent or empty."""
        ...


class ConfigProvider(Protocol):
    """Protocol for loading user default configuration."""

    def load(self, path: Path | None = None) -> LaunchConfig:
        """Load configuration.

        Args:
            path: Explicit config file, or None for the global location.

        Returns:
            LaunchConfig instance with loaded or default values

        Note:
            Implementations should gracefully fall back to defaults
            if config file is missing or invalid.
        """
        ...
