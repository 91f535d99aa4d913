"""Factory classes for pipeline and adapter instantiation.

This module centralizes the wiring of the launch pipeline, keeping the CLI
and library entry points free from direct adapter construction.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from idelaunch.core.launch import LaunchPipeline
    from idelaunch.core.resolver import EditorResolver
    from idelaunch.domain.editors import Platform
    from idelaunch.ports.config import ConfigProvider, OverrideSource
    from idelaunch.ports.editor import EditorOrchestrator
    from idelaunch.ports.process import ProcessLister


class LaunchFactory:
    """Factory for the resolver, orchestrator and pipeline.

    Args:
        platform: Platform family (default: current platform).
        project_dir: Directory holding ``.env.local`` (default: cwd at lookup).
        environ: Environment mapping (default: ``os.environ``).
    """

    def __init__(
        self,
        platform: Platform | None = None,
        project_dir: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        from idelaunch.domain.editors import get_platform_family

        self._platform = platform or get_platform_family()
        self._project_dir = project_dir
        self._environ = environ

    def create_override_sources(self) -> list[OverrideSource]:
        """Create CODE_EDITOR / format override sources in priority order."""
        from idelaunch.adapters.config.env_config_source import (
            DotenvOverrideSource,
            EnvironOverrideSource,
        )

        return [
            EnvironOverrideSource(self._environ),
            DotenvOverrideSource(self._project_dir),
        ]

    def create_process_lister(self) -> ProcessLister:
        from idelaunch.adapters.process.ps_lister import ShellProcessLister

        return ShellProcessLister()

    def create_resolver(self) -> EditorResolver:
        from idelaunch.core.resolver import EditorResolver

        return EditorResolver(
            self.create_process_lister(),
            self.create_override_sources(),
            platform=self._platform,
            environ=self._environ,
        )

    def create_orchestrator(self) -> EditorOrchestrator:
        from idelaunch.adapters.editor import SubprocessOrchestrator

        return SubprocessOrchestrator(platform=self._platform, environ=self._environ)

    def create_pipeline(
        self, orchestrator: EditorOrchestrator | None = None
    ) -> LaunchPipeline:
        """Create a launch pipeline.

        Args:
            orchestrator: Orchestrator to reuse, so several pipelines can share
                one tracked process (default: a new one).
        """
        from idelaunch.core.launch import LaunchPipeline

        return LaunchPipeline(
            self.create_resolver(),
            orchestrator or self.create_orchestrator(),
            self.create_override_sources(),
        )


class ConfigFactory:
    """Factory for creating configuration providers."""

    def create_config_provider(self) -> ConfigProvider:
        """Create a configuration provider.

        Returns:
            TomlConfigProvider reading the global config file.
        """
        from idelaunch.adapters.config.toml_config_provider import TomlConfigProvider

        return TomlConfigProvider()
