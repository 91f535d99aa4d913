"""Known editors per platform family.

Two read-only tables drive editor detection:

- ``COMMON_EDITORS`` maps a process-detection key to the command used to
  launch that editor. On macOS the key is an app-bundle suffix and a value
  containing ``/`` is a path relative to the discovered install prefix. On
  Windows the key is an executable file name. Elsewhere the key is a
  substring searched for in the process listing.
- ``EDITOR_PROCESS_NAMES`` maps a canonical editor name to the detection
  keys that identify it. It is used to honor a preferred editor and to map an
  installed binary path back to its canonical name.
"""

import sys
from types import MappingProxyType
from typing import Literal, Mapping

Platform = Literal["darwin", "linux", "win32"]

PLATFORMS: tuple[Platform, ...] = ("darwin", "linux", "win32")


def get_platform_family(platform: str | None = None) -> Platform:
    """Collapse a ``sys.platform`` value into one of the supported families.

    Args:
        platform: Value to classify (default: ``sys.platform``).

    Returns:
        ``"darwin"``, ``"win32"``, or ``"linux"`` for any other Unix-like.
    """
    value = sys.platform if platform is None else platform
    if value.startswith("darwin"):
        return "darwin"
    if value.startswith(("win32", "cygwin")):
        return "win32"
    return "linux"


_COMMON_EDITORS_DARWIN = {
    "/Visual Studio Code.app/Contents/MacOS/Electron": "/Visual Studio Code.app/Contents/Resources/app/bin/code",
    "/Visual Studio Code.app/Contents/MacOS/Code": "/Visual Studio Code.app/Contents/Resources/app/bin/code",
    "/Visual Studio Code - Insiders.app/Contents/MacOS/Electron": "/Visual Studio Code - Insiders.app/Contents/Resources/app/bin/code",
    "/VSCodium.app/Contents/MacOS/Electron": "/VSCodium.app/Contents/Resources/app/bin/codium",
    "/Cursor.app/Contents/MacOS/Cursor": "/Cursor.app/Contents/Resources/app/bin/cursor",
    "/Windsurf.app/Contents/MacOS/Electron": "/Windsurf.app/Contents/Resources/app/bin/windsurf",
    "/Zed.app/Contents/MacOS/zed": "zed",
    "/Atom.app/Contents/MacOS/Atom": "atom",
    "/Atom Beta.app/Contents/MacOS/Atom Beta": "/Atom Beta.app/Contents/MacOS/Atom Beta",
    "/Brackets.app/Contents/MacOS/Brackets": "brackets",
    "/Sublime Text.app/Contents/MacOS/Sublime Text": "/Sublime Text.app/Contents/SharedSupport/bin/subl",
    "/Sublime Text 2.app/Contents/MacOS/Sublime Text 2": "/Sublime Text 2.app/Contents/SharedSupport/bin/subl",
    "/MacVim.app/Contents/MacOS/Vim": "mvim",
    "/AppCode.app/Contents/MacOS/appcode": "/AppCode.app/Contents/MacOS/appcode",
    "/CLion.app/Contents/MacOS/clion": "/CLion.app/Contents/MacOS/clion",
    "/IntelliJ IDEA.app/Contents/MacOS/idea": "/IntelliJ IDEA.app/Contents/MacOS/idea",
    "/IntelliJ IDEA Ultimate.app/Contents/MacOS/idea": "/IntelliJ IDEA Ultimate.app/Contents/MacOS/idea",
    "/IntelliJ IDEA CE.app/Contents/MacOS/idea": "/IntelliJ IDEA CE.app/Contents/MacOS/idea",
    "/PhpStorm.app/Contents/MacOS/phpstorm": "/PhpStorm.app/Contents/MacOS/phpstorm",
    "/PyCharm.app/Contents/MacOS/pycharm": "/PyCharm.app/Contents/MacOS/pycharm",
    "/PyCharm CE.app/Contents/MacOS/pycharm": "/PyCharm CE.app/Contents/MacOS/pycharm",
    "/RubyMine.app/Contents/MacOS/rubymine": "/RubyMine.app/Contents/MacOS/rubymine",
    "/WebStorm.app/Contents/MacOS/webstorm": "/WebStorm.app/Contents/MacOS/webstorm",
    "/GoLand.app/Contents/MacOS/goland": "/GoLand.app/Contents/MacOS/goland",
    "/Rider.app/Contents/MacOS/rider": "/Rider.app/Contents/MacOS/rider",
    "/HBuilderX.app/Contents/MacOS/HBuilderX": "/HBuilderX.app/Contents/MacOS/HBuilderX",
}

_COMMON_EDITORS_LINUX = {
    "code-insiders": "code-insiders",
    "code": "code",
    "vscodium": "vscodium",
    "codium": "codium",
    "cursor": "cursor",
    "windsurf": "windsurf",
    "zed": "zed",
    "atom": "atom",
    "Brackets": "brackets",
    "sublime_text": "sublime_text",
    "emacs": "emacs",
    "gvim": "gvim",
    "vim": "vim",
    "clion.sh": "clion",
    "idea.sh": "idea",
    "phpstorm.sh": "phpstorm",
    "pycharm.sh": "pycharm",
    "rubymine.sh": "rubymine",
    "webstorm.sh": "webstorm",
    "goland.sh": "goland",
    "rider.sh": "rider",
}

_COMMON_EDITORS_WIN32 = {
    "Code.exe": "Code.exe",
    "Code - Insiders.exe": "Code - Insiders.exe",
    "VSCodium.exe": "VSCodium.exe",
    "Cursor.exe": "Cursor.exe",
    "Windsurf.exe": "Windsurf.exe",
    "Zed.exe": "Zed.exe",
    "atom.exe": "atom.exe",
    "Brackets.exe": "Brackets.exe",
    "sublime_text.exe": "sublime_text.exe",
    "notepad++.exe": "notepad++.exe",
    "clion.exe": "clion.exe",
    "clion64.exe": "clion64.exe",
    "idea.exe": "idea.exe",
    "idea64.exe": "idea64.exe",
    "phpstorm.exe": "phpstorm.exe",
    "phpstorm64.exe": "phpstorm64.exe",
    "pycharm.exe": "pycharm.exe",
    "pycharm64.exe": "pycharm64.exe",
    "rubymine.exe": "rubymine.exe",
    "rubymine64.exe": "rubymine64.exe",
    "webstorm.exe": "webstorm.exe",
    "webstorm64.exe": "webstorm64.exe",
    "goland.exe": "goland.exe",
    "goland64.exe": "goland64.exe",
    "rider.exe": "rider.exe",
    "rider64.exe": "rider64.exe",
    "HBuilderX.exe": "HBuilderX.exe",
}

# Process-name variants are listed most-specific first where one is a suffix
# of another (gvim before vim, code-insiders before code).
_PROCESS_NAMES_DARWIN = {
    "code-insiders": ("/Visual Studio Code - Insiders.app/Contents/MacOS/Electron",),
    "code": (
        "/Visual Studio Code.app/Contents/MacOS/Electron",
        "/Visual Studio Code.app/Contents/MacOS/Code",
    ),
    "codium": ("/VSCodium.app/Contents/MacOS/Electron",),
    "cursor": ("/Cursor.app/Contents/MacOS/Cursor",),
    "windsurf": ("/Windsurf.app/Contents/MacOS/Electron",),
    "zed": ("/Zed.app/Contents/MacOS/zed",),
    "atom-beta": ("/Atom Beta.app/Contents/MacOS/Atom Beta",),
    "atom": ("/Atom.app/Contents/MacOS/Atom",),
    "brackets": ("/Brackets.app/Contents/MacOS/Brackets",),
    "sublime": (
        "/Sublime Text.app/Contents/MacOS/Sublime Text",
        "/Sublime Text 2.app/Contents/MacOS/Sublime Text 2",
    ),
    "mvim": ("/MacVim.app/Contents/MacOS/Vim",),
    "appcode": ("/AppCode.app/Contents/MacOS/appcode",),
    "clion": ("/CLion.app/Contents/MacOS/clion",),
    "idea": (
        "/IntelliJ IDEA.app/Contents/MacOS/idea",
        "/IntelliJ IDEA Ultimate.app/Contents/MacOS/idea",
        "/IntelliJ IDEA CE.app/Contents/MacOS/idea",
    ),
    "phpstorm": ("/PhpStorm.app/Contents/MacOS/phpstorm",),
    "pycharm": (
        "/PyCharm.app/Contents/MacOS/pycharm",
        "/PyCharm CE.app/Contents/MacOS/pycharm",
    ),
    "rubymine": ("/RubyMine.app/Contents/MacOS/rubymine",),
    "webstorm": ("/WebStorm.app/Contents/MacOS/webstorm",),
    "goland": ("/GoLand.app/Contents/MacOS/goland",),
    "rider": ("/Rider.app/Contents/MacOS/rider",),
    "hbuilder": ("/HBuilderX.app/Contents/MacOS/HBuilderX",),
}

_PROCESS_NAMES_LINUX = {
    "code-insiders": ("code-insiders",),
    "code": ("code",),
    "codium": ("vscodium", "codium"),
    "cursor": ("cursor",),
    "windsurf": ("windsurf",),
    "zed": ("zed",),
    "atom": ("atom",),
    "brackets": ("Brackets",),
    "sublime": ("sublime_text",),
    "emacs": ("emacs",),
    "gvim": ("gvim",),
    "vim": ("vim",),
    "clion": ("clion.sh",),
    "idea": ("idea.sh",),
    "phpstorm": ("phpstorm.sh",),
    "pycharm": ("pycharm.sh",),
    "rubymine": ("rubymine.sh",),
    "webstorm": ("webstorm.sh",),
    "goland": ("goland.sh",),
    "rider": ("rider.sh",),
}

_PROCESS_NAMES_WIN32 = {
    "code-insiders": ("Code - Insiders.exe",),
    "code": ("Code.exe",),
    "codium": ("VSCodium.exe",),
    "cursor": ("Cursor.exe",),
    "windsurf": ("Windsurf.exe",),
    "zed": ("Zed.exe",),
    "atom": ("atom.exe",),
    "brackets": ("Brackets.exe",),
    "sublime": ("sublime_text.exe",),
    "notepad++": ("notepad++.exe",),
    "clion": ("clion.exe", "clion64.exe"),
    "idea": ("idea.exe", "idea64.exe"),
    "phpstorm": ("phpstorm.exe", "phpstorm64.exe"),
    "pycharm": ("pycharm.exe", "pycharm64.exe"),
    "rubymine": ("rubymine.exe", "rubymine64.exe"),
    "webstorm": ("webstorm.exe", "webstorm64.exe"),
    "goland": ("goland.exe", "goland64.exe"),
    "rider": ("rider.exe", "rider64.exe"),
    "hbuilder": ("HBuilderX.exe",),
}

COMMON_EDITORS: Mapping[Platform, Mapping[str, str]] = MappingProxyType(
    {
        "darwin": MappingProxyType(_COMMON_EDITORS_DARWIN),
        "linux": MappingProxyType(_COMMON_EDITORS_LINUX),
        "win32": MappingProxyType(_COMMON_EDITORS_WIN32),
    }
)

EDITOR_PROCESS_NAMES: Mapping[Platform, Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        "darwin": MappingProxyType(_PROCESS_NAMES_DARWIN),
        "linux": MappingProxyType(_PROCESS_NAMES_LINUX),
        "win32": MappingProxyType(_PROCESS_NAMES_WIN32),
    }
)

# Editors that take over the host terminal's stdin/stdout.
TERMINAL_EDITORS = frozenset({"vim", "emacs", "nano"})


def get_process_names(editor: str, platform: Platform) -> tuple[str, ...] | None:
    """Return the detection keys of a known editor, or None if unknown.

    Example:
        >>> get_process_names("code", "linux")
        ('code',)
    """
    return EDITOR_PROCESS_NAMES[platform].get(editor)


def known_editor_names(platform: Platform) -> list[str]:
    """Return canonical editor names known on ``platform``, sorted."""
    return sorted(EDITOR_PROCESS_NAMES[platform])
