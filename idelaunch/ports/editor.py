"""Editor process port.

Defines the abstract interface for spawning editor processes, allowing a
subprocess-backed implementation and test doubles.
"""

from collections.abc import Callable
from concurrent.futures import Future
from typing import Protocol

from idelaunch.domain.entities import EditorIdentity, LaunchOutcome

ErrorCallback = Callable[[str, str], None]


class EditorOrchestrator(Protocol):
    """Protocol for launching editor processes.

    Implementations own the "current child process" state used to keep at
    most one terminal editor attached to the host terminal.
    """

    def launch(
        self,
        editor: EditorIdentity,
        args: list[str],
        file: str,
        on_error: ErrorCallback | None = None,
    ) -> "Future[LaunchOutcome]":
        """Spawn ``editor`` with ``args`` to open ``file``.

        Args:
            editor: Resolved editor to run.
            args: Synthesized position arguments.
            file: File being opened, used in error reports.
            on_error: Called as ``on_error(file, message)`` on failure.
                When omitted, remediation instructions are printed.

        Returns:
            Future resolved once with the launch outcome.
        """
        ...
