"""Tests for the known-editor tables."""

import pytest

from idelaunch.domain.editors import (
    COMMON_EDITORS,
    EDITOR_PROCESS_NAMES,
    PLATFORMS,
    get_platform_family,
    get_process_names,
    known_editor_names,
)


class TestGetPlatformFamily:
    """Tests for collapsing sys.platform values."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("darwin", "darwin"),
            ("win32", "win32"),
            ("cygwin", "win32"),
            ("linux", "linux"),
            ("freebsd14", "linux"),
        ],
    )
    def test_families(self, value: str, expected: str) -> None:
        """Test that each platform string maps to its family."""
        assert get_platform_family(value) == expected

    def test_defaults_to_current_platform(self) -> None:
        """Test that no argument classifies the running platform."""
        assert get_platform_family() in PLATFORMS


class TestEditorTables:
    """Tests for table consistency."""

    @pytest.mark.parametrize("platform", PLATFORMS)
    def test_every_process_name_is_a_detection_key(self, platform: str) -> None:
        """Test that preferred-editor variants can actually be detected."""
        keys = set(COMMON_EDITORS[platform])
        for editor, names in EDITOR_PROCESS_NAMES[platform].items():
            for name in names:
                assert name in keys, f"{editor}: {name} missing on {platform}"

    def test_tables_are_read_only(self) -> None:
        """Test that the tables cannot be mutated at runtime."""
        with pytest.raises(TypeError):
            COMMON_EDITORS["linux"]["nano"] = "nano"  # type: ignore[index]

    def test_get_process_names_known_editor(self) -> None:
        """Test lookup of a known editor."""
        assert get_process_names("code", "win32") == ("Code.exe",)

    def test_get_process_names_unknown_editor(self) -> None:
        """Test that unknown editors return None."""
        assert get_process_names("my-editor", "linux") is None

    def test_known_editor_names_sorted(self) -> None:
        """Test that names are listed alphabetically."""
        names = known_editor_names("darwin")
        assert names == sorted(names)
        assert "code" in names
