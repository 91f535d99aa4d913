"""Argument synthesis for opening a file at a position in an editor.

Each editor family encodes the target position differently:

    code -g /path/to/file.js:10:5
    subl /path/to/file.js:10:5
    vim "+call cursor(10, 5)" /path/to/file.js
    notepad++ -n10 -c5 /path/to/file.js
    idea --line 10 /path/to/file.js

Argument order matters: editors parse positional arguments strictly, so the
workspace goes before flags, and flags before the file spec.
"""

import ntpath
import posixpath
import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from idelaunch.domain.editors import EDITOR_PROCESS_NAMES, Platform, get_platform_family
from idelaunch.domain.entities import OpenMethod, OpenRequest, PathFormat

FORMAT_FILE = "{file}"
FORMAT_LINE = "{line}"
FORMAT_COLUMN = "{column}"

# Whole-fragment slots filled from the request, dropped when empty
WORKSPACE_SLOT = "{workspace}"
WINDOW_SLOT = "{window}"

DEFAULT_FORMAT = f"{FORMAT_FILE}:{FORMAT_LINE}:{FORMAT_COLUMN}"

_EXECUTABLE_SUFFIX = re.compile(r"\.(exe|cmd|bat|sh)$", re.IGNORECASE)


@dataclass(frozen=True)
class FormatRule:
    """Path-format rule shared by a family of editors.

    Attributes:
        template: A single template string, or an ordered tuple of fragments
            that may include the workspace and window slots.
    """

    template: str | tuple[str, ...]

    def render(self, workspace: str | None = None, window_flag: str = "") -> PathFormat:
        """Fill the workspace and window slots.

        Returns:
            The template string unchanged, or a list of fragments with empty
            slots removed.
        """
        if isinstance(self.template, str):
            return self.template
        fragments: list[str] = []
        for fragment in self.template:
            if fragment == WORKSPACE_SLOT:
                if workspace:
                    fragments.append(workspace)
            elif fragment == WINDOW_SLOT:
                if window_flag:
                    fragments.append(window_flag)
            else:
                fragments.append(fragment)
        return fragments


# Editor families grouped by the position convention they share
EDITOR_FAMILIES = {
    "file-line-column": {
        "editors": (
            "atom",
            "atom beta",
            "atom-beta",
            "subl",
            "sublime",
            "sublime_text",
            "wstorm",
            "charm",
            "zed",
        ),
        "rule": FormatRule(DEFAULT_FORMAT),
    },
    "notepad++": {
        "editors": ("notepad++",),
        "rule": FormatRule(("-n" + FORMAT_LINE, "-c" + FORMAT_COLUMN, FORMAT_FILE)),
    },
    "vim": {
        "editors": ("vim", "mvim"),
        "rule": FormatRule(
            (f"+call cursor({FORMAT_LINE}, {FORMAT_COLUMN})", FORMAT_FILE)
        ),
    },
    "plus-line": {
        "editors": ("joe", "gvim"),
        "rule": FormatRule(("+" + FORMAT_LINE, FORMAT_FILE)),
    },
    "emacs": {
        "editors": ("emacs", "emacsclient"),
        "rule": FormatRule((f"+{FORMAT_LINE}:{FORMAT_COLUMN}", FORMAT_FILE)),
    },
    "textmate": {
        "editors": ("rmate", "mate", "mine"),
        "rule": FormatRule(("--line", FORMAT_LINE, FORMAT_FILE)),
    },
    "vscode": {
        "editors": (
            "code",
            "code-insiders",
            "code - insiders",
            "codium",
            "cursor",
            "windsurf",
            "vscodium",
            "hbuilderx",
            "hbuilder",
        ),
        "rule": FormatRule((WORKSPACE_SLOT, "-g", WINDOW_SLOT, DEFAULT_FORMAT)),
    },
    "jetbrains": {
        "editors": (
            "appcode",
            "clion",
            "clion64",
            "idea",
            "idea64",
            "phpstorm",
            "phpstorm64",
            "pycharm",
            "pycharm64",
            "rubymine",
            "rubymine64",
            "webstorm",
            "webstorm64",
            "goland",
            "goland64",
            "rider",
            "rider64",
        ),
        "rule": FormatRule((WORKSPACE_SLOT, "--line", FORMAT_LINE, FORMAT_FILE)),
    },
}

EDITOR_FORMATS: Mapping[str, FormatRule] = MappingProxyType(
    {
        editor: family["rule"]
        for family in EDITOR_FAMILIES.values()
        for editor in family["editors"]
    }
)


def get_editor_basename(command: str, platform: Platform | None = None) -> str:
    """Map an editor command or binary path to its canonical lowercase name.

    Strips the directory and any .exe/.cmd/.bat/.sh suffix, then checks the
    raw command against every known process path so that app-bundle and
    install paths resolve to the name used in ``EDITOR_FORMATS``.

    Example:
        >>> get_editor_basename("C:\\\\Program Files\\\\Microsoft VS Code\\\\Code.exe", "win32")
        'code'
        >>> get_editor_basename("/usr/bin/code", "linux")
        'code'
    """
    family = platform or get_platform_family()
    pathmod = ntpath if family == "win32" else posixpath
    basename = _EXECUTABLE_SUFFIX.sub("", pathmod.basename(command))

    for editor, process_names in EDITOR_PROCESS_NAMES[family].items():
        if any(command.endswith(name) for name in process_names):
            basename = editor
            break

    return basename.lower()


def get_format_by_editor(
    basename: str,
    workspace: str | None = None,
    method: OpenMethod | None = None,
) -> PathFormat | None:
    """Return the built-in path format for a canonical editor name.

    Returns:
        The format, or None for editors outside every known family.
    """
    rule = EDITOR_FORMATS.get(basename)
    if rule is None:
        return None
    return rule.render(workspace, method.window_flag if method else "")


def _substitute(template: str, file: str, line: str, column: str) -> str:
    # First occurrence only, per placeholder
    return (
        template.replace(FORMAT_FILE, file, 1)
        .replace(FORMAT_LINE, line, 1)
        .replace(FORMAT_COLUMN, column, 1)
    )


def format_open_path(
    file: str, line: int | str, column: int | str, path_format: PathFormat
) -> list[str]:
    """Substitute the position placeholders into a path format.

    Args:
        file: File path.
        line: Line number.
        column: Column number.
        path_format: Template string, or ordered list of templates.

    Returns:
        A single-element list for a string format, otherwise one element per
        template in the same order.

    Example:
        >>> format_open_path("/a/b.js", 10, 5, ["+{line}", "{file}"])
        ['+10', '/a/b.js']
    """
    line_str, column_str = str(line), str(column)
    if isinstance(path_format, str):
        return [_substitute(path_format, file, line_str, column_str)]
    return [_substitute(item, file, line_str, column_str) for item in path_format]


def synthesize(
    editor_command: str, request: OpenRequest, platform: Platform | None = None
) -> list[str]:
    """Build the position arguments for opening ``request`` in an editor.

    A request without a line opens the bare file. Otherwise a custom format
    on the request replaces the editor's built-in rule; editors with neither
    get ``{file}:{line}:{column}``.

    Example:
        >>> synthesize("vim", OpenRequest(file="/a/b.js", line=10, column=5))
        ['+call cursor(10, 5)', '/a/b.js']
    """
    if not request.line:
        return [request.file]

    if request.format:
        path_format: PathFormat = request.format
    else:
        basename = get_editor_basename(editor_command, platform)
        path_format = (
            get_format_by_editor(basename, request.workspace, request.method)
            or DEFAULT_FORMAT
        )

    return format_open_path(request.file, request.line, request.column, path_format)
