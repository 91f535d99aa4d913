"""Reading and writing the global idelaunch config file.

The file is TOML with a single ``[launch]`` table; see ``LaunchConfig``.
"""

import os
import platform
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from idelaunch.domain.config import LaunchConfig

CONFIG_DIRNAME = "idelaunch"
CONFIG_FILENAME = "config.toml"

DEFAULT_CONFIG_TEMPLATE = """\
# idelaunch configuration
# Created by: idelaunch config init

[launch]
# Editor to prefer when several are running, or a literal command.
# The CODE_EDITOR environment variable and .env.local take precedence.
# editor = "code"

# Window placement for VS Code style editors: "reuse" or "new"
# method = "reuse"

# Custom argument format; {file}, {line} and {column} are substituted.
# format = ["--goto", "{file}:{line}:{column}"]
"""


def get_config_dir() -> Path:
    """Directory holding the global config file.

    %APPDATA% on Windows, $XDG_CONFIG_HOME elsewhere, and ~/.config when
    the variable is unset.
    """
    env_key = "APPDATA" if platform.system() == "Windows" else "XDG_CONFIG_HOME"
    base = os.environ.get(env_key)
    root = Path(base) if base else Path.home() / ".config"
    return root / CONFIG_DIRNAME


def get_global_config_path() -> Path:
    """Path of the global config file, which may not exist yet."""
    return get_config_dir() / CONFIG_FILENAME


def load_config_data(path: Path) -> dict[str, Any]:
    """Parse a config file into a plain dict.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file is not valid TOML.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        raise FileNotFoundError(f"Config file not found: {path}") from None
    try:
        return tomllib.loads(raw.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid TOML in {path}: {e}") from e


def load_config(path: Path) -> LaunchConfig:
    """Read ``path`` into a LaunchConfig.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file is malformed or holds invalid values.
    """
    return LaunchConfig.from_partial(LaunchConfig.default(), load_config_data(path))


def save_config(config: LaunchConfig, path: Path) -> None:
    """Write ``config`` to ``path``, omitting unset values."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(tomli_w.dumps(config.to_dict()).encode("utf-8"))


def create_default_config_file(path: Path) -> None:
    """Write the commented template with every option unset."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
