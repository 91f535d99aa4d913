"""Editor process adapter.

Spawns editors with subprocess and reports how each launch ended. Only the
most recently spawned process is tracked; a new terminal editor replaces it
so two editors never share the host terminal.
"""

import logging
import os
import re
import subprocess
import threading
from collections.abc import Mapping
from concurrent.futures import Future

from idelaunch.core.arguments import get_editor_basename
from idelaunch.core.instructions import print_instructions
from idelaunch.domain.editors import TERMINAL_EDITORS, Platform, get_platform_family
from idelaunch.domain.entities import EditorIdentity, LaunchOutcome
from idelaunch.ports.editor import ErrorCallback

logger = logging.getLogger(__name__)

# Cleared in the child so Electron based editors start with default options
CLEARED_ENV_VARS = ("NODE_OPTIONS",)

_CMD_METACHARS = re.compile(r"([&|<>,;=^])")


def escape_cmd_arg(arg: str) -> str:
    """Caret-escape cmd.exe metacharacters.

    Example:
        >>> escape_cmd_arg("a&b")
        'a^&b'
    """
    return _CMD_METACHARS.sub(r"^\1", arg)


def quote_cmd_token(token: str) -> str:
    """Quote a cmd.exe token containing a caret or a space.

    Caret-escaped tokens get caret quotes, tokens with spaces get plain
    double quotes, never both.
    """
    if "^" in token:
        return f'^"{token}^"'
    if " " in token:
        return f'"{token}"'
    return token


def build_cmd_line(argv: list[str]) -> str:
    """Join an argument vector into a cmd.exe command line.

    The executable is quoted but not escaped; every argument is both.
    """
    command, *args = argv
    tokens = [command, *(escape_cmd_arg(arg) for arg in args)]
    return " ".join(quote_cmd_token(token) for token in tokens)


def is_terminal_editor(command: str, platform: Platform | None = None) -> bool:
    """Return True for editors that take over the host terminal."""
    return get_editor_basename(command, platform) in TERMINAL_EDITORS


class SubprocessOrchestrator:
    """Launches editor processes and tracks the current one.

    Each instance owns its own "current process" slot, so separate
    orchestrators never interfere with each other.

    Args:
        platform: Platform family (default: current platform).
        environ: Base environment for children (default: ``os.environ``).
    """

    def __init__(
        self,
        platform: Platform | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._platform = platform or get_platform_family()
        self._environ = os.environ if environ is None else environ
        self._current: subprocess.Popen | None = None
        self._lock = threading.Lock()

    @property
    def current_process(self) -> subprocess.Popen | None:
        """The tracked editor process, if one is believed alive."""
        with self._lock:
            return self._current

    def launch(
        self,
        editor: EditorIdentity,
        args: list[str],
        file: str,
        on_error: ErrorCallback | None = None,
    ) -> "Future[LaunchOutcome]":
        """Spawn ``editor`` with ``args``.

        Returns immediately; the returned future resolves when the process
        exits or could not be started.
        """
        future: Future[LaunchOutcome] = Future()

        if is_terminal_editor(editor.command, self._platform):
            self._kill_current()

        try:
            process = self._spawn(editor, args)
        except OSError as e:
            logger.info("Failed to start %s: %s", editor.command, e)
            with self._lock:
                self._current = None
            self._finish(future, LaunchOutcome.spawn_failure(str(e)), file, on_error)
            return future

        with self._lock:
            self._current = process
        logger.debug("Started %s (pid %s)", editor.command, process.pid)

        watcher = threading.Thread(
            target=self._watch,
            args=(process, future, file, on_error),
            name=f"idelaunch-watch-{process.pid}",
            daemon=True,
        )
        watcher.start()
        return future

    def _kill_current(self) -> None:
        """Kill the tracked process if it is still running."""
        with self._lock:
            process = self._current
            self._current = None
        if process is None or process.poll() is not None:
            return
        logger.debug("Killing previous editor process %s", process.pid)
        try:
            process.kill()
        except OSError as e:
            logger.debug("Could not kill process %s: %s", process.pid, e)

    def _child_env(self) -> dict[str, str]:
        env = dict(self._environ)
        for name in CLEARED_ENV_VARS:
            env[name] = ""
        return env

    def _spawn(self, editor: EditorIdentity, args: list[str]) -> subprocess.Popen:
        """Start the editor with inherited stdio.

        Raises:
            OSError: If the process could not be created.
        """
        argv = editor.argv(args)
        if self._platform == "win32":
            return subprocess.Popen(build_cmd_line(argv), shell=True, env=self._child_env())
        return subprocess.Popen(argv, env=self._child_env())

    def _watch(
        self,
        process: subprocess.Popen,
        future: "Future[LaunchOutcome]",
        file: str,
        on_error: ErrorCallback | None,
    ) -> None:
        """Wait for ``process`` to exit and report the outcome."""
        returncode = process.wait()
        with self._lock:
            if self._current is process:
                self._current = None

        # Negative codes mean the process was killed by a signal
        if returncode > 0:
            logger.info("Editor process %s exited with code %s", process.pid, returncode)
            outcome = LaunchOutcome.exit_failure(returncode, pid=process.pid)
        else:
            outcome = LaunchOutcome.success(pid=process.pid)
        self._finish(future, outcome, file, on_error)

    def _finish(
        self,
        future: "Future[LaunchOutcome]",
        outcome: LaunchOutcome,
        file: str,
        on_error: ErrorCallback | None,
    ) -> None:
        try:
            message = outcome.error_message
            if message is not None:
                if on_error is not None:
                    on_error(file, message)
                else:
                    print_instructions(file, message)
        finally:
            future.set_result(outcome)
