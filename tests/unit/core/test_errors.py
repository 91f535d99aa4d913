"""Tests for CLI errors with hints."""

import pytest

from idelaunch.core.errors import (
    IdeLaunchCliError,
    editor_not_resolved_error,
    invalid_target_error,
)
from idelaunch.domain.exceptions import EditorResolutionError


class TestIdeLaunchCliError:
    """Tests for IdeLaunchCliError formatting."""

    def test_message_without_hint(self) -> None:
        assert IdeLaunchCliError("boom").format_message() == "boom"

    def test_hint_on_second_line(self) -> None:
        """Test that the hint follows the message."""
        error = IdeLaunchCliError("boom", hint="try again")
        assert error.format_message() == "boom\nHint: try again"

    def test_from_error_keeps_hint(self) -> None:
        """Test wrapping a domain error."""
        domain = EditorResolutionError("no editor", hint="set CODE_EDITOR")

        error = IdeLaunchCliError.from_error(domain, prefix="open: ")

        assert error.message == "open: no editor"
        assert error.hint == "set CODE_EDITOR"


def test_editor_not_resolved_error() -> None:
    with pytest.raises(IdeLaunchCliError, match="Failed to recognize IDE") as exc_info:
        editor_not_resolved_error()
    assert "CODE_EDITOR" in exc_info.value.hint


def test_invalid_target_error() -> None:
    with pytest.raises(IdeLaunchCliError, match="Invalid target 'a.py:0'"):
        invalid_target_error("a.py:0")
