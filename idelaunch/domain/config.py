"""Config domain models for idelaunch.

User defaults are stored in the global config.toml under a ``[launch]``
section. They only supply defaults for the CLI options; they never change how
an editor is resolved.
"""

from dataclasses import dataclass, fields, replace
from typing import Any

# Keys read from the process environment and from .env.local
EDITOR_ENV_KEY = "CODE_EDITOR"
FORMAT_PATH_ENV_KEY = "CODE_INSPECTOR_FORMAT_PATH"
LOCAL_ENV_FILENAME = ".env.local"


def validate_path_format(value: Any) -> str | list[str]:
    """Check that ``value`` is a template string or a list of template strings.

    Raises:
        ValueError: If the value has any other shape.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return list(value)
    raise ValueError(f"format must be a string or list of strings, got {value!r}")


@dataclass(frozen=True)
class LaunchConfig:
    """Default launch options.

    Attributes:
        editor: Editor name or command used when the caller gives none.
        method: Window placement, "reuse" or "new".
        format: Custom path format (string or list of strings).

    Raises:
        ValueError: If method or format is invalid.
    """

    editor: str | None = None
    method: str | None = None
    format: str | list[str] | None = None

    def __post_init__(self) -> None:
        """Validate launch config after initialization."""
        if self.editor is not None and not isinstance(self.editor, str):
            raise ValueError(f"editor must be a string, got {self.editor!r}")
        if self.method not in (None, "reuse", "new"):
            raise ValueError(f"method must be 'reuse' or 'new', got {self.method!r}")
        if self.format is not None:
            validate_path_format(self.format)

    @staticmethod
    def default() -> "LaunchConfig":
        """Create a config with all default values."""
        return LaunchConfig()

    @staticmethod
    def from_partial(base: "LaunchConfig", data: dict[str, Any]) -> "LaunchConfig":
        """Overlay the ``[launch]`` section of raw config data onto ``base``.

        Unknown keys are ignored.

        Raises:
            ValueError: If the section is not a table or a value is invalid.
        """
        section = data.get("launch", {})
        if not isinstance(section, dict):
            raise ValueError("[launch] must be a table")
        known = {f.name for f in fields(LaunchConfig)}
        overrides = {k: v for k, v in section.items() if k in known}
        return replace(base, **overrides)

    def to_dict(self) -> dict[str, Any]:
        """Serializable form, omitting unset values."""
        data: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                data[f.name] = value
        return {"launch": data}
