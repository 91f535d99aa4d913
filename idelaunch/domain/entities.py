"""Core domain entities for idelaunch.

These are the values that flow through the resolve -> synthesize -> launch
pipeline. All of them are immutable.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from idelaunch.domain.exceptions import EditorExitError, EditorSpawnError

PathFormat = str | list[str] | tuple[str, ...]


class OpenMethod(Enum):
    """How an editor with window support should place the file."""

    REUSE = "reuse"
    NEW = "new"

    @property
    def window_flag(self) -> str:
        """Command-line flag understood by the VS Code family."""
        return "-r" if self is OpenMethod.REUSE else "-n"

    @classmethod
    def parse(cls, value: "str | OpenMethod | None") -> "OpenMethod | None":
        """Convert user input into an OpenMethod.

        ``None``, the empty string and ``"auto"`` mean unset.

        Raises:
            ValueError: If the value is not a known method.
        """
        if value is None or isinstance(value, OpenMethod):
            return value
        if value in ("", "auto"):
            return None
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"method must be 'reuse' or 'new', got {value!r}"
            ) from None


@dataclass(frozen=True)
class EditorIdentity:
    """Resolved way to invoke an editor.

    Attributes:
        command: Executable path or command name.
        args: Fixed leading arguments placed before the position arguments.
    """

    command: str
    args: tuple[str, ...] = ()

    def argv(self, extra: list[str] | tuple[str, ...] = ()) -> list[str]:
        """Full argument vector: command, fixed arguments, then ``extra``."""
        return [self.command, *self.args, *extra]


@dataclass(frozen=True)
class OpenRequest:
    """A normalized request to open ``file`` at a position.

    Attributes:
        file: Path of the file to open.
        line: 1-based line, or None to open the file without a position.
        column: 1-based column.
        editor: Explicit editor name or command requested by the caller.
        method: Window placement for editors that support it.
        format: Custom path format (template string or list of templates).
        workspace: Workspace folder passed to editors that accept one.

    Raises:
        ValueError: If line or column is not a positive integer.
    """

    file: str
    line: int | None = 1
    column: int = 1
    editor: str | None = None
    method: OpenMethod | None = None
    format: PathFormat | None = None
    workspace: str | None = None

    def __post_init__(self) -> None:
        if self.line is not None and self.line <= 0:
            raise ValueError(f"line must be positive, got {self.line}")
        if self.column <= 0:
            raise ValueError(f"column must be positive, got {self.column}")


OutcomeKind = Literal["success", "exit_failure", "spawn_failure"]


@dataclass(frozen=True)
class LaunchOutcome:
    """Completion result of a single editor launch.

    Attributes:
        kind: ``success``, ``exit_failure`` or ``spawn_failure``.
        code: Exit code for ``exit_failure``.
        message: OS error message for ``spawn_failure``.
        pid: Process id, when a process was created.
    """

    kind: OutcomeKind
    code: int | None = None
    message: str | None = None
    pid: int | None = field(default=None, compare=False)

    @classmethod
    def success(cls, pid: int | None = None) -> "LaunchOutcome":
        return cls(kind="success", pid=pid)

    @classmethod
    def exit_failure(cls, code: int, pid: int | None = None) -> "LaunchOutcome":
        return cls(kind="exit_failure", code=code, pid=pid)

    @classmethod
    def spawn_failure(cls, message: str) -> "LaunchOutcome":
        return cls(kind="spawn_failure", message=message)

    @property
    def ok(self) -> bool:
        return self.kind == "success"

    @property
    def error_message(self) -> str | None:
        """Message reported to the user for a failed launch."""
        if self.kind == "exit_failure":
            return f"(code {self.code})"
        if self.kind == "spawn_failure":
            return self.message
        return None

    def raise_for_error(self) -> None:
        """Raise the matching error for a failed launch; do nothing on success.

        Raises:
            EditorExitError: If the editor exited with a non-zero code.
            EditorSpawnError: If the editor process could not be created.
        """
        if self.kind == "exit_failure":
            raise EditorExitError(self.code)
        if self.kind == "spawn_failure":
            raise EditorSpawnError(self.message or "could not start the editor")
