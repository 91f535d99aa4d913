"""Tests for config I/O utilities."""

import tomllib
from pathlib import Path
from unittest.mock import patch

import pytest

from idelaunch.domain.config import LaunchConfig
from idelaunch.shared.config_io import (
    create_default_config_file,
    get_global_config_path,
    load_config,
    load_config_data,
    save_config,
)


class TestGetGlobalConfigPath:
    """Tests for get_global_config_path function."""

    def test_respects_xdg_config_home(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        """Test that XDG_CONFIG_HOME is used on Unix-like systems."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        with patch("platform.system", return_value="Linux"):
            assert get_global_config_path() == tmp_path / "idelaunch" / "config.toml"

    def test_falls_back_to_home(self, monkeypatch: pytest.MonkeyPatch):
        """Test the ~/.config fallback without XDG_CONFIG_HOME."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        with patch("platform.system", return_value="Darwin"):
            path = get_global_config_path()
        assert path == Path.home() / ".config" / "idelaunch" / "config.toml"

    def test_windows_uses_appdata(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        """Test that %APPDATA% is used on Windows."""
        monkeypatch.setenv("APPDATA", str(tmp_path))
        with patch("platform.system", return_value="Windows"):
            assert get_global_config_path() == tmp_path / "idelaunch" / "config.toml"


class TestLoadConfig:
    """Tests for reading config files."""

    def test_missing_file_raises(self, tmp_path: Path):
        """Test that reading a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config_data(tmp_path / "config.toml")

    def test_invalid_toml_raises_value_error(self, tmp_path: Path):
        """Test that TOML syntax errors become ValueError."""
        path = tmp_path / "config.toml"
        path.write_text("launch = [")
        with pytest.raises(ValueError, match="Invalid TOML"):
            load_config_data(path)

    def test_load_config(self, tmp_path: Path):
        """Test loading values into a LaunchConfig."""
        path = tmp_path / "config.toml"
        path.write_text('[launch]\nformat = "{file}:{line}"\n')
        assert load_config(path) == LaunchConfig(format="{file}:{line}")


class TestSaveConfig:
    """Tests for writing config files."""

    def test_save_then_load(self, tmp_path: Path):
        """Test that saved values are read back."""
        path = tmp_path / "nested" / "config.toml"
        config = LaunchConfig(editor="code", method="reuse", format=["-g", "{file}"])

        save_config(config, path)

        assert load_config(path) == config

    def test_unset_values_not_written(self, tmp_path: Path):
        """Test that None values are omitted from the file."""
        path = tmp_path / "config.toml"
        save_config(LaunchConfig(editor="vim"), path)
        with path.open("rb") as f:
            assert tomllib.load(f) == {"launch": {"editor": "vim"}}


class TestCreateDefaultConfigFile:
    """Tests for the commented config template."""

    def test_template_loads_as_defaults(self, tmp_path: Path):
        """Test that the template sets nothing but is valid TOML."""
        path = tmp_path / "idelaunch" / "config.toml"
        create_default_config_file(path)

        assert "[launch]" in path.read_text()
        assert load_config(path) == LaunchConfig.default()
