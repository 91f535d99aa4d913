"""Process listing port.

Defines the interface used by editor detection to see which programs are
currently running.
"""

from typing import Protocol

from idelaunch.domain.editors import Platform


class ProcessLister(Protocol):
    """Protocol for enumerating running processes."""

    def list_processes(self, platform: Platform) -> str:
        """Return the raw process listing for ``platform``.

        One process (name or executable path) per line.

        Args:
            platform: Platform family whose listing command should be used.

        Returns:
            Raw listing text.

        Raises:
            OSError: If the listing command could not be run.
            subprocess.CalledProcessError: If every listing command failed.
        """
        ...

    def prepare_console(self, platform: Platform) -> None:
        """Best-effort console setup before listing (never raises)."""
        ...
