"""Domain exceptions for idelaunch.

These describe why a launch could not happen. The library entry point turns
them into ``on_error`` callbacks or console instructions; the CLI converts
them to user-facing errors.
"""


class IdeLaunchError(Exception):
    """Base exception for all launch errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class EditorResolutionError(IdeLaunchError):
    """Raised when no editor could be identified."""

    pass


class EditorSpawnError(IdeLaunchError):
    """Raised when the OS could not create the editor process."""

    pass


class EditorExitError(IdeLaunchError):
    """Raised when the editor exited with a non-zero code."""

    def __init__(self, code: int, hint: str | None = None) -> None:
        super().__init__(f"(code {code})", hint=hint)
        self.code = code
