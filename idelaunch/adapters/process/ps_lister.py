"""Process lister adapter using the platform's process listing commands."""

import logging
import subprocess

from idelaunch.domain.editors import Platform

logger = logging.getLogger(__name__)

# Shell commands printing one running process per line
PROCESS_LIST_COMMANDS: dict[Platform, str] = {
    "darwin": "ps ax -o comm=",
    "linux": "ps -eo comm --sort=comm",
    # wmic is faster but no longer ships with recent Windows builds
    "win32": 'wmic process where "executablepath is not null" get executablepath',
}

WIN32_FALLBACK_COMMAND = (
    'powershell -NoProfile -Command "Get-CimInstance -Query '
    "\\\"select executablepath from win32_process where executablepath is not null\\\""
    ' | % { $_.ExecutablePath }"'
)

# Switch the console to UTF-8 so non-ASCII install paths survive
WIN32_CODE_PAGE_COMMAND = "chcp 65001"


class ShellProcessLister:
    """Lists running processes by shelling out to ps, wmic or PowerShell."""

    def _run(self, command: str) -> str:
        """Run a listing command and return its decoded stdout.

        Raises:
            subprocess.CalledProcessError: If the command exits non-zero.
            OSError: If the shell could not be started.
        """
        result = subprocess.run(
            command,
            shell=True,
            capture_output=True,
            check=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
        return result.stdout

    def prepare_console(self, platform: Platform) -> None:
        """Switch the Windows console code page to UTF-8, ignoring failures."""
        if platform != "win32":
            return
        try:
            subprocess.run(
                WIN32_CODE_PAGE_COMMAND,
                shell=True,
                capture_output=True,
                check=True,
            )
        except (subprocess.CalledProcessError, OSError) as e:
            logger.debug("Could not change console code page: %s", e)

    def list_processes(self, platform: Platform) -> str:
        """Return the raw process listing for ``platform``.

        On Windows a failing wmic call falls back to PowerShell. On other
        platforms a failing ps call yields an empty listing.

        Raises:
            subprocess.CalledProcessError: If the Windows fallback also fails.
            OSError: If the Windows fallback shell could not be started.
        """
        try:
            return self._run(PROCESS_LIST_COMMANDS[platform])
        except (subprocess.CalledProcessError, OSError) as e:
            if platform != "win32":
                logger.debug("Process listing failed: %s", e)
                return ""
            logger.debug("wmic listing failed (%s), trying PowerShell", e)
        return self._run(WIN32_FALLBACK_COMMAND)
