"""Tests for environment and .env.local override sources."""

from pathlib import Path

import pytest

from idelaunch.adapters.config.env_config_source import (
    DotenvOverrideSource,
    EnvironOverrideSource,
    default_override_sources,
    get_format_override,
    parse_format_override,
)
from tests.conftest import FakeOverrideSource


class TestEnvironOverrideSource:
    """Tests for EnvironOverrideSource."""

    def test_reads_mapping(self) -> None:
        """Test lookup in the given environment."""
        assert EnvironOverrideSource({"CODE_EDITOR": "zed"}).get("CODE_EDITOR") == "zed"

    def test_empty_value_is_unset(self) -> None:
        """Test that an empty variable counts as unset."""
        assert EnvironOverrideSource({"CODE_EDITOR": ""}).get("CODE_EDITOR") is None

    def test_defaults_to_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test reading os.environ when no mapping is given."""
        monkeypatch.setenv("CODE_EDITOR", "cursor")
        assert EnvironOverrideSource().get("CODE_EDITOR") == "cursor"


class TestDotenvOverrideSource:
    """Tests for DotenvOverrideSource."""

    def test_reads_env_local(self, tmp_path: Path) -> None:
        """Test parsing of KEY=value lines."""
        (tmp_path / ".env.local").write_text("# editor\nCODE_EDITOR=webstorm\n")
        assert DotenvOverrideSource(tmp_path).get("CODE_EDITOR") == "webstorm"

    def test_quoted_json_value(self, tmp_path: Path) -> None:
        """Test that quoted values keep their inner text."""
        (tmp_path / ".env.local").write_text(
            "CODE_INSPECTOR_FORMAT_PATH='[\"-g\", \"{file}\"]'\n"
        )
        source = DotenvOverrideSource(tmp_path)
        assert source.get("CODE_INSPECTOR_FORMAT_PATH") == '["-g", "{file}"]'

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that no file means no value."""
        assert DotenvOverrideSource(tmp_path).get("CODE_EDITOR") is None

    def test_uses_current_directory(self, isolated_editor_env: Path) -> None:
        """Test that the default project directory is the cwd."""
        (isolated_editor_env / ".env.local").write_text("CODE_EDITOR=zed\n")
        source = DotenvOverrideSource()
        assert source.path == isolated_editor_env / ".env.local"
        assert source.get("CODE_EDITOR") == "zed"

    def test_reread_on_every_lookup(self, tmp_path: Path) -> None:
        """Test that edits to the file apply immediately."""
        env_file = tmp_path / ".env.local"
        env_file.write_text("CODE_EDITOR=vim\n")
        source = DotenvOverrideSource(tmp_path)
        assert source.get("CODE_EDITOR") == "vim"

        env_file.write_text("CODE_EDITOR=emacs\n")

        assert source.get("CODE_EDITOR") == "emacs"


def test_default_sources_order() -> None:
    """Test that the environment is consulted before .env.local."""
    sources = default_override_sources()
    assert [source.name for source in sources] == ["environment", ".env.local"]


class TestFormatOverride:
    """Tests for parsing CODE_INSPECTOR_FORMAT_PATH."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ('"{file}:{line}"', "{file}:{line}"),
            ('["-g", "{file}"]', ["-g", "{file}"]),
            ("", None),
            (None, None),
            ("{file}", None),
            ("42", None),
            ('["-g", 1]', None),
        ],
    )
    def test_parse(self, raw: str | None, expected) -> None:
        """Test that only JSON strings and string lists are accepted."""
        assert parse_format_override(raw) == expected

    def test_first_defining_source_wins(self) -> None:
        """Test source priority for the format override."""
        sources = [
            FakeOverrideSource({}),
            FakeOverrideSource({"CODE_INSPECTOR_FORMAT_PATH": '"{file}"'}),
            FakeOverrideSource({"CODE_INSPECTOR_FORMAT_PATH": '"{line}"'}),
        ]
        assert get_format_override(sources) == "{file}"

    def test_no_sources(self) -> None:
        """Test that nothing configured means no override."""
        assert get_format_override([]) is None
