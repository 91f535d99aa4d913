"""Launch override sources.

Overrides come from two places, checked in this order:

1. The process environment (set by the host tool or its bundler).
2. ``.env.local`` in the project directory, parsed with python-dotenv.
"""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

from idelaunch.domain.config import (
    FORMAT_PATH_ENV_KEY,
    LOCAL_ENV_FILENAME,
    validate_path_format,
)
from idelaunch.ports.config import OverrideSource

logger = logging.getLogger(__name__)


class EnvironOverrideSource:
    """Overrides read from a process environment mapping."""

    name = "environment"

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, key: str) -> str | None:
        return self._environ.get(key) or None


class DotenvOverrideSource:
    """Overrides read from a project-local ``.env.local`` file.

    The file is re-read on every lookup so edits apply to the next launch.
    """

    name = LOCAL_ENV_FILENAME

    def __init__(self, project_dir: Path | None = None) -> None:
        self._project_dir = project_dir

    @property
    def path(self) -> Path:
        base = self._project_dir if self._project_dir is not None else Path.cwd()
        return base / LOCAL_ENV_FILENAME

    def get(self, key: str) -> str | None:
        path = self.path
        if not path.is_file():
            return None
        try:
            values = dotenv_values(path, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read %s: %s", path, e)
            return None
        return values.get(key) or None


def default_override_sources(project_dir: Path | None = None) -> list[OverrideSource]:
    """Return the override sources in priority order."""
    return [EnvironOverrideSource(), DotenvOverrideSource(project_dir)]


def parse_format_override(raw: str | None) -> str | list[str] | None:
    """Decode a JSON path-format override.

    Returns:
        A template string or list of template strings, or None when ``raw``
        is empty, not valid JSON, or of any other shape.
    """
    if not raw:
        return None
    try:
        return validate_path_format(json.loads(raw))
    except (json.JSONDecodeError, ValueError) as e:
        logger.debug("Ignoring %s=%r: %s", FORMAT_PATH_ENV_KEY, raw, e)
        return None


def get_format_override(sources: list[OverrideSource]) -> str | list[str] | None:
    """Return the path-format override from the first source defining one.

    A source that defines the key with an unparseable value ends the lookup,
    the same as having no override.
    """
    for source in sources:
        raw = source.get(FORMAT_PATH_ENV_KEY)
        if raw:
            return parse_format_override(raw)
    return None
