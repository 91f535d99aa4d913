"""CLI errors carrying a remediation hint."""

from typing import NoReturn

import click

from idelaunch.domain.exceptions import IdeLaunchError

CONFIGURE_EDITOR_HINT = (
    "Pass --editor code, set CODE_EDITOR in .env.local, or set $VISUAL/$EDITOR"
)


class IdeLaunchCliError(click.ClickException):
    """Click error printed as the message plus an optional ``Hint:`` line.

    Example:
        raise IdeLaunchCliError("Invalid target 'a.py:0'", hint="Lines start at 1")
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    @classmethod
    def from_error(cls, error: IdeLaunchError, prefix: str = "") -> "IdeLaunchCliError":
        """Wrap a domain error, keeping its hint."""
        return cls(f"{prefix}{error.message}", hint=error.hint)

    def format_message(self) -> str:
        if not self.hint:
            return self.message
        return f"{self.message}\nHint: {self.hint}"


def editor_not_resolved_error() -> NoReturn:
    """Raise the error shown when no editor could be identified."""
    raise IdeLaunchCliError(
        "Failed to recognize IDE automatically", hint=CONFIGURE_EDITOR_HINT
    )


def invalid_target_error(target: str) -> NoReturn:
    """Raise the error shown for an unparseable ``PATH[:LINE[:COLUMN]]``."""
    raise IdeLaunchCliError(
        f"Invalid target '{target}'",
        hint="Use PATH, PATH:LINE or PATH:LINE:COLUMN with positive numbers",
    )
