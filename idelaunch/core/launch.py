"""Launch pipeline: resolve the editor, build its arguments, spawn it.

``launch_ide`` is the library entry point used by developer tools that want
to jump from a runtime artifact (stack frame, overlay, inspector click) to a
source position. It never raises for launch problems: failures go to the
``on_error(file, message)`` callback, or to the console when there is none.
A file that does not exist is silently ignored.
"""

import logging
import os
import platform as platform_mod
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass, replace
from functools import lru_cache

from idelaunch.adapters.config.env_config_source import get_format_override
from idelaunch.core.arguments import synthesize
from idelaunch.core.instructions import print_unrecognized_editor
from idelaunch.core.resolver import EditorResolver
from idelaunch.domain.editors import Platform
from idelaunch.domain.entities import (
    EditorIdentity,
    LaunchOutcome,
    OpenMethod,
    OpenRequest,
    PathFormat,
)
from idelaunch.domain.exceptions import EditorResolutionError
from idelaunch.ports.config import OverrideSource
from idelaunch.ports.editor import EditorOrchestrator, ErrorCallback

logger = logging.getLogger(__name__)

UNRECOGNIZED_EDITOR_MESSAGE = "Failed to recognize IDE automatically"

# Windows drives as seen from WSL
WSL_MOUNT_PREFIX = "/mnt/"


def is_wsl(platform: Platform, kernel_release: str) -> bool:
    """Return True when running Linux under the Windows Subsystem for Linux.

    WSL kernels report releases such as ``4.4.0-43-Microsoft`` or
    ``5.15.90.1-microsoft-standard-WSL2``.
    """
    return platform == "linux" and "microsoft" in kernel_release.lower()


def rewrite_wsl_path(
    file: str, platform: Platform, kernel_release: str, cwd: str | None = None
) -> str:
    """Make a /mnt/ path relative when the editor runs on the Windows side.

    WSL interop translates relative paths for Windows editors but not
    absolute Linux ones.
    """
    if file.startswith(WSL_MOUNT_PREFIX) and is_wsl(platform, kernel_release):
        return os.path.relpath(file, cwd if cwd is not None else os.getcwd())
    return file


@dataclass(frozen=True)
class LaunchPlan:
    """Fully resolved launch: what to run, with which arguments.

    Attributes:
        editor: Resolved editor.
        args: Position arguments following the editor's fixed arguments.
        file: File path as passed to the editor.
    """

    editor: EditorIdentity
    args: tuple[str, ...]
    file: str

    @property
    def argv(self) -> list[str]:
        return self.editor.argv(self.args)


class LaunchPipeline:
    """Runs resolve -> synthesize -> launch for one request at a time.

    Args:
        resolver: Editor resolver.
        orchestrator: Process orchestrator owning the current child process.
        override_sources: Sources for the path-format override.
        kernel_release: Kernel release string (default: ``platform.release()``).
        cwd: Directory WSL paths are made relative to (default: current).
    """

    def __init__(
        self,
        resolver: EditorResolver,
        orchestrator: EditorOrchestrator,
        override_sources: list[OverrideSource] | None = None,
        kernel_release: str | None = None,
        cwd: str | None = None,
    ) -> None:
        self._resolver = resolver
        self._orchestrator = orchestrator
        self._sources = list(override_sources or [])
        self._kernel_release = (
            platform_mod.release() if kernel_release is None else kernel_release
        )
        self._cwd = cwd

    def plan(self, request: OpenRequest) -> LaunchPlan:
        """Resolve the editor and synthesize its arguments without spawning.

        Raises:
            EditorResolutionError: If no editor could be identified.
        """
        editor = self._resolver.resolve(request.editor)
        if editor is None or editor.command.lower() == "none":
            raise EditorResolutionError(
                UNRECOGNIZED_EDITOR_MESSAGE,
                hint="Set CODE_EDITOR in .env.local or pass an editor explicitly",
            )

        path_format = get_format_override(self._sources) or request.format
        platform = self._resolver.platform
        file = rewrite_wsl_path(request.file, platform, self._kernel_release, self._cwd)
        request = replace(request, file=file, format=path_format)

        args = synthesize(editor.command, request, platform)
        logger.debug("Launch plan: %s", [*editor.argv(), *args])
        return LaunchPlan(editor=editor, args=tuple(args), file=file)

    def run(
        self, request: OpenRequest, on_error: ErrorCallback | None = None
    ) -> "Future[LaunchOutcome] | None":
        """Open ``request`` in the resolved editor.

        Returns:
            Future for the launch outcome, or None if nothing was launched
            (missing file or unrecognized editor).
        """
        if not os.path.exists(request.file):
            logger.debug("Not opening missing file %s", request.file)
            return None

        try:
            plan = self.plan(request)
        except EditorResolutionError as e:
            logger.info("%s for %s", e.message, request.file)
            if on_error is not None:
                on_error(request.file, e.message)
            else:
                print_unrecognized_editor()
            return None

        return self._orchestrator.launch(
            plan.editor, list(plan.args), plan.file, on_error
        )


@lru_cache(maxsize=1)
def get_default_pipeline() -> LaunchPipeline:
    """Process-wide pipeline used by ``launch_ide``.

    Sharing one orchestrator keeps a single tracked editor process across
    calls.
    """
    from idelaunch.adapters.factory import LaunchFactory

    return LaunchFactory().create_pipeline()


def launch_ide(
    file: str | os.PathLike[str],
    line: int | None = 1,
    column: int | None = 1,
    editor: str | None = None,
    method: str | OpenMethod | None = None,
    format: PathFormat | None = None,
    on_error: Callable[[str, str], None] | None = None,
) -> None:
    """Open ``file`` at ``line``/``column`` in the user's editor.

    Args:
        file: File to open. Missing files are ignored.
        line: 1-based line, or None to open the file without a position.
        column: 1-based column (default: 1).
        editor: Preferred editor name, or a literal command.
        method: ``"reuse"`` or ``"new"`` window, for editors supporting it.
        format: Custom path format; ``{file}``, ``{line}`` and ``{column}``
            are substituted.
        on_error: Called as ``on_error(file, message)`` when the launch fails.

    Example:
        >>> launch_ide("src/app.py", line=42, column=7)  # doctest: +SKIP
    """
    request = OpenRequest(
        file=os.fspath(file),
        line=line or None,
        column=column or 1,
        editor=editor,
        method=OpenMethod.parse(method),
        format=format,
    )
    get_default_pipeline().run(request, on_error)
