"""Editor resolution.

Decides which editor to launch, checking in order:

1. ``CODE_EDITOR`` in the process environment
2. ``CODE_EDITOR`` in the project's ``.env.local``
3. The editor requested by the caller
4. Editors currently running, found by listing processes
5. ``$VISUAL``, then ``$EDITOR``

A configured name that is a known editor does not end resolution: it marks
that editor as preferred when several editors are running. Any other
configured value is taken literally as the command to run.

Resolution is repeated for every launch since the set of running editors
changes between requests.
"""

import logging
import ntpath
import os
import shlex
import shutil
import subprocess
from collections.abc import Mapping

from idelaunch.domain.config import EDITOR_ENV_KEY
from idelaunch.domain.editors import (
    COMMON_EDITORS,
    Platform,
    get_platform_family,
    get_process_names,
)
from idelaunch.domain.entities import EditorIdentity
from idelaunch.ports.config import OverrideSource
from idelaunch.ports.process import ProcessLister

logger = logging.getLogger(__name__)

# Consulted only when nothing else resolves
FALLBACK_ENV_KEYS = ("VISUAL", "EDITOR")


class EditorResolver:
    """Resolves the editor to launch from configuration and running processes.

    Args:
        process_lister: Source of the running process listing.
        override_sources: ``CODE_EDITOR`` sources in priority order.
        platform: Platform family (default: current platform).
        environ: Environment for the ``$VISUAL``/``$EDITOR`` fallback.
    """

    def __init__(
        self,
        process_lister: ProcessLister,
        override_sources: list[OverrideSource] | None = None,
        platform: Platform | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._lister = process_lister
        self._sources = list(override_sources or [])
        self._platform = platform or get_platform_family()
        self._environ = os.environ if environ is None else environ

    @property
    def platform(self) -> Platform:
        return self._platform

    def resolve(self, editor: str | None = None) -> EditorIdentity | None:
        """Resolve the editor for one launch.

        Args:
            editor: Editor name or command requested by the caller.

        Returns:
            The editor to run, or None if nothing could be found.
        """
        preferred: tuple[str, ...] | None = None

        for source in self._sources:
            configured = source.get(EDITOR_ENV_KEY)
            if not configured:
                continue
            preferred = get_process_names(configured, self._platform)
            if preferred is None:
                logger.debug("Using %s from %s", configured, source.name)
                return EditorIdentity(configured)
            logger.debug("Preferring %s from %s", configured, source.name)
            break

        if editor and preferred is None:
            preferred = get_process_names(editor, self._platform)
            if preferred is None:
                logger.debug("Using requested editor %s", editor)
                return EditorIdentity(editor)

        try:
            command = self._find_running_editor(preferred)
        except (subprocess.CalledProcessError, OSError, ValueError) as e:
            # Process listing is best-effort; fall through to $VISUAL/$EDITOR
            logger.debug("Running editor detection failed: %s", e)
            command = None
        if command:
            logger.debug("Detected running editor %s", command)
            return EditorIdentity(command)

        return self._from_environment()

    def _find_running_editor(self, preferred: tuple[str, ...] | None) -> str | None:
        """Return the command of a running known editor.

        A running preferred editor wins immediately. Otherwise the first
        match in table order is returned; with several unrelated editors
        running, which one comes first is a property of the table only.
        """
        self._lister.prepare_console(self._platform)
        output = self._lister.list_processes(self._platform)
        running = [line.strip() for line in output.splitlines()]

        first: str | None = None
        for key, command in COMMON_EDITORS[self._platform].items():
            match = self._match(key, command, output, running)
            if match is None:
                continue
            running_name, editor_command = match
            if preferred and running_name in preferred:
                return editor_command
            if first is None:
                first = editor_command
        return first

    def _match(
        self, key: str, command: str, output: str, running: list[str]
    ) -> tuple[str, str] | None:
        """Check one table entry against the process listing.

        Returns:
            ``(running_name, editor_command)`` on a match, else None.
        """
        if self._platform == "win32":
            # Exact executable file name, launched by its full path
            for process_path in running:
                if ntpath.basename(process_path) == key:
                    return ntpath.basename(process_path), process_path
            return None

        if self._platform == "darwin":
            # App-bundle suffix; the rest of the path is the install prefix
            for process_path in running:
                if process_path.endswith(key):
                    if "/" in command:
                        prefix = process_path.replace(key, "", 1)
                        return key, f"{prefix}{command}"
                    return key, command
            return None

        if key in output:
            return key, command
        return None

    def _from_environment(self) -> EditorIdentity | None:
        for key in FALLBACK_ENV_KEYS:
            value = self._environ.get(key, "").strip()
            if not value:
                continue
            parts = self._split_command(value)
            if parts:
                logger.debug("Using $%s=%s", key, value)
                return EditorIdentity(parts[0], tuple(parts[1:]))
        return None

    def _split_command(self, value: str) -> list[str]:
        """Split ``$VISUAL``/``$EDITOR`` into command and fixed arguments.

        A value naming an existing file or a command on PATH is used whole,
        so unquoted install paths with spaces survive. Windows values are
        never split.
        """
        if self._platform == "win32" or os.path.isfile(value) or shutil.which(value):
            return [value]
        try:
            return shlex.split(value)
        except ValueError:
            return [value]
