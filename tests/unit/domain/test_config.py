"""Tests for domain config classes validation."""

import pytest

from idelaunch.domain.config import LaunchConfig, validate_path_format


class TestLaunchConfigValidation:
    """Tests for LaunchConfig validation."""

    def test_defaults_are_unset(self):
        """Test that the default config sets nothing."""
        config = LaunchConfig.default()
        assert config.editor is None
        assert config.method is None
        assert config.format is None

    def test_valid_values(self):
        """Test creating a config with every field."""
        config = LaunchConfig(editor="code", method="new", format=["-g", "{file}"])
        assert config.method == "new"

    def test_invalid_method_raises(self):
        """Test that unknown methods are rejected."""
        with pytest.raises(ValueError, match="method must be"):
            LaunchConfig(method="split")

    def test_invalid_format_raises(self):
        """Test that format must be a string or list of strings."""
        with pytest.raises(ValueError, match="format must be"):
            LaunchConfig(format=["{file}", 3])  # type: ignore[list-item]

    def test_invalid_editor_raises(self):
        """Test that editor must be a string."""
        with pytest.raises(ValueError, match="editor must be"):
            LaunchConfig(editor=7)  # type: ignore[arg-type]


class TestFromPartial:
    """Tests for merging raw config data."""

    def test_overlays_launch_section(self):
        """Test that present keys override the base."""
        base = LaunchConfig(editor="vim", method="reuse")
        merged = LaunchConfig.from_partial(base, {"launch": {"editor": "code"}})
        assert merged.editor == "code"
        assert merged.method == "reuse"

    def test_ignores_unknown_keys_and_sections(self):
        """Test that unrelated data is ignored."""
        merged = LaunchConfig.from_partial(
            LaunchConfig(), {"launch": {"colour": "red"}, "other": {"x": 1}}
        )
        assert merged == LaunchConfig()

    def test_validates_merged_values(self):
        """Test that invalid merged values raise."""
        with pytest.raises(ValueError):
            LaunchConfig.from_partial(LaunchConfig(), {"launch": {"method": "x"}})

    def test_non_table_section_raises(self):
        """Test that [launch] must be a table."""
        with pytest.raises(ValueError, match="must be a table"):
            LaunchConfig.from_partial(LaunchConfig(), {"launch": "code"})

    def test_to_dict_omits_unset(self):
        """Test serialization skips None values."""
        assert LaunchConfig(editor="zed").to_dict() == {"launch": {"editor": "zed"}}


def test_validate_path_format_converts_tuple():
    """Test that tuples are normalized to lists."""
    assert validate_path_format(("{file}", "{line}")) == ["{file}", "{line}"]
