"""Pytest configuration and shared fixtures."""

import subprocess
import threading
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

_REAL_POPEN = subprocess.Popen

# ============================================================================
# Environment Isolation
# ============================================================================
# Editor resolution reads CODE_EDITOR, CODE_INSPECTOR_FORMAT_PATH, $VISUAL and
# $EDITOR from the environment and .env.local from the working directory.
# Clear them so a developer's own setup never leaks into tests.


@pytest.fixture(autouse=True)
def isolated_editor_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Remove editor-related variables and run from an empty directory."""
    for name in ("CODE_EDITOR", "CODE_INSPECTOR_FORMAT_PATH", "VISUAL", "EDITOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    workdir = tmp_path / "project"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


# ============================================================================
# Process Listing Helpers
# ============================================================================


class FakeProcessLister:
    """ProcessLister test double returning a canned listing.

    Attributes:
        output: Listing returned by list_processes.
        error: Exception raised by list_processes instead, if set.
        calls: Platforms list_processes was called with.
        prepared: Platforms prepare_console was called with.
    """

    def __init__(self, output: str = "", error: Exception | None = None) -> None:
        self.output = output
        self.error = error
        self.calls: list[str] = []
        self.prepared: list[str] = []

    def prepare_console(self, platform: str) -> None:
        self.prepared.append(platform)

    def list_processes(self, platform: str) -> str:
        self.calls.append(platform)
        if self.error is not None:
            raise self.error
        return self.output


class FakeOverrideSource:
    """OverrideSource test double backed by a dict."""

    def __init__(self, values: dict[str, str] | None = None, name: str = "fake") -> None:
        self.values = values or {}
        self.name = name

    def get(self, key: str) -> str | None:
        return self.values.get(key) or None


@pytest.fixture
def lister() -> FakeProcessLister:
    """A process lister reporting no running processes."""
    return FakeProcessLister()


@pytest.fixture
def listing_failure() -> subprocess.CalledProcessError:
    """Error raised by a failing process listing command."""
    return subprocess.CalledProcessError(1, "ps")


# ============================================================================
# Subprocess Helpers
# ============================================================================


def make_process(
    pid: int = 1234,
    returncode: int = 0,
    block: threading.Event | None = None,
) -> MagicMock:
    """Create a mock Popen object.

    Args:
        pid: Process id.
        returncode: Value returned by wait().
        block: When given, wait() and poll() report a running process until
            the event is set.
    """
    process = MagicMock(spec=_REAL_POPEN)
    process.pid = pid

    def wait(timeout: float | None = None) -> int:
        if block is not None:
            block.wait()
        return returncode

    def poll() -> int | None:
        if block is not None and not block.is_set():
            return None
        return returncode

    process.wait.side_effect = wait
    process.poll.side_effect = poll
    return process


@pytest.fixture
def release_processes():
    """Event that unblocks mock processes created with ``block``.

    Set automatically at teardown so watcher threads finish.
    """
    event = threading.Event()
    yield event
    event.set()


@pytest.fixture
def mock_popen() -> Callable:
    """Patch subprocess.Popen; configure return_value or side_effect."""
    with patch("subprocess.Popen") as popen:
        popen.return_value = make_process()
        yield popen


@pytest.fixture
def target_file(isolated_editor_env: Path) -> Path:
    """An existing source file to open."""
    path = isolated_editor_env / "src" / "app.js"
    path.parent.mkdir()
    path.write_text("console.log('hi')\n")
    return path
