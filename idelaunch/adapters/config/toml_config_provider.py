"""TOML-based configuration provider.

Loads user launch defaults from the global config file
(~/.config/idelaunch/config.toml), falling back to built-in defaults.
"""

import logging
from pathlib import Path

from idelaunch.domain.config import LaunchConfig
from idelaunch.shared.config_io import get_global_config_path, load_config_data

logger = logging.getLogger(__name__)


class TomlConfigProvider:
    """Configuration provider that loads from a TOML file.

    Gracefully handles missing or invalid configs with warnings.
    """

    def load(self, path: Path | None = None) -> LaunchConfig:
        """Load launch defaults.

        Args:
            path: Config file to read (default: the global config path)

        Returns:
            LaunchConfig with file values applied over defaults
        """
        config_path = path if path is not None else get_global_config_path()
        config = LaunchConfig.default()

        if not config_path.exists():
            return config

        try:
            data = load_config_data(config_path)
            config = LaunchConfig.from_partial(config, data)
            logger.debug("Loaded config from %s", config_path)
        except (FileNotFoundError, ValueError, TypeError) as e:
            logger.warning(
                "Failed to parse config at %s: %s. Using default configuration.",
                config_path,
                e,
            )
            return LaunchConfig.default()

        return config
