"""idelaunch CLI entrypoint.

Command-line interface for opening files at a line and column in the
user's editor.
"""

from __future__ import annotations

import functools
import logging
import shlex
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from idelaunch.domain.config import LaunchConfig

from idelaunch.core.errors import (
    CONFIGURE_EDITOR_HINT,
    IdeLaunchCliError,
    editor_not_resolved_error,
    invalid_target_error,
)
from idelaunch.domain.entities import OpenMethod, OpenRequest
from idelaunch.domain.exceptions import IdeLaunchError
from idelaunch.version import __version__


def handle_cli_errors(command_name: str):
    """Decorator to handle common CLI errors.

    IdeLaunchCliError exceptions are re-raised to use their built-in
    formatting; domain and validation errors are converted to them.

    Args:
        command_name: Name of the command for error messages.

    Returns:
        Decorated function with error handling.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (IdeLaunchCliError, click.exceptions.Exit):
                raise
            except IdeLaunchError as e:
                raise IdeLaunchCliError.from_error(e) from e
            except ValueError as e:
                raise IdeLaunchCliError(str(e)) from e
            except Exception as e:
                ctx = click.get_current_context()
                if ctx.obj.get("verbose", False):
                    import traceback

                    traceback.print_exc()
                raise IdeLaunchCliError(
                    f"Unexpected error in {command_name}: {e}",
                    hint="Run with --verbose for more details",
                ) from e

        return wrapper

    return decorator


def _load_config() -> LaunchConfig:
    """Load user launch defaults from the global config file."""
    from idelaunch.adapters.factory import ConfigFactory

    return ConfigFactory().create_config_provider().load()


def parse_target(target: str) -> tuple[str, int | None, int | None]:
    """Split ``PATH[:LINE[:COLUMN]]`` into its parts.

    Parsing starts from the right so Windows drive letters survive.

    Example:
        >>> parse_target("src/app.py:10:5")
        ('src/app.py', 10, 5)
        >>> parse_target("C:\\\\src\\\\app.py:10")
        ('C:\\\\src\\\\app.py', 10, None)
    """
    parts = target.rsplit(":", 2)
    if len(parts) == 3 and parts[1].isdigit() and parts[2].isdigit():
        path, line, column = parts[0], int(parts[1]), int(parts[2])
    else:
        parts = target.rsplit(":", 1)
        if len(parts) == 2 and parts[1].isdigit():
            path, line, column = parts[0], int(parts[1]), None
        else:
            return target, None, None
    if not path or line == 0 or column == 0:
        invalid_target_error(target)
    return path, line, column


def _format_option(formats: tuple[str, ...]) -> str | list[str] | None:
    """One --format is a template string, several form a template list."""
    if not formats:
        return None
    if len(formats) == 1:
        return formats[0]
    return list(formats)


def _build_request(
    target: str,
    line: int | None,
    column: int | None,
    editor: str | None,
    method: str | None,
    formats: tuple[str, ...],
    defaults: LaunchConfig,
) -> OpenRequest:
    """Combine the target, options and config defaults into a request."""
    file, target_line, target_column = parse_target(target)
    return OpenRequest(
        file=file,
        line=line or target_line or 1,
        column=column or target_column or 1,
        editor=editor or defaults.editor,
        method=OpenMethod.parse(method or defaults.method),
        format=_format_option(formats) or defaults.format,
    )


def _format_argv(argv: list[str]) -> str:
    return " ".join(shlex.quote(arg) for arg in argv)


def _launch_options(func):
    """Options shared by commands that build an open request."""
    func = click.option(
        "--format",
        "-f",
        "formats",
        multiple=True,
        help="Custom argument format using {file}, {line}, {column}. "
        "Repeat to pass several arguments.",
    )(func)
    func = click.option(
        "--method",
        "-m",
        type=click.Choice(["reuse", "new"]),
        default=None,
        help="Reuse an existing window or open a new one (VS Code family).",
    )(func)
    func = click.option(
        "--editor", "-e", default=None, help="Preferred editor name or command."
    )(func)
    func = click.option(
        "--column", "-c", type=click.IntRange(min=1), default=None, help="Column number."
    )(func)
    func = click.option(
        "--line", "-l", type=click.IntRange(min=1), default=None, help="Line number."
    )(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="idelaunch")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress non-essential output.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """idelaunch - Open files at a line and column in your editor.

    Detects the editor you are running, or uses the one you configure, and
    passes it the arguments it needs to jump to the position.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="open")
@click.argument("target", type=str)
@_launch_options
@click.option(
    "--wait",
    "-w",
    is_flag=True,
    help="Wait for the editor to exit and fail if it reports an error.",
)
@click.pass_context
@handle_cli_errors("open")
def open_file(
    ctx: click.Context,
    target: str,
    line: int | None,
    column: int | None,
    editor: str | None,
    method: str | None,
    formats: tuple[str, ...],
    wait: bool,
) -> None:
    """Open TARGET in the editor.

    TARGET is PATH, PATH:LINE or PATH:LINE:COLUMN. A file that does not
    exist is ignored.
    """
    from idelaunch.adapters.editor import is_terminal_editor
    from idelaunch.adapters.factory import LaunchFactory

    request = _build_request(target, line, column, editor, method, formats, _load_config())
    if not Path(request.file).exists():
        return

    factory = LaunchFactory()
    orchestrator = factory.create_orchestrator()
    plan = factory.create_pipeline(orchestrator).plan(request)

    if not ctx.obj.get("quiet", False):
        click.echo(f"Opening {plan.file} in {plan.editor.command}")

    # Failures are reported below as a CLI error instead of console instructions
    future = orchestrator.launch(
        plan.editor, list(plan.args), plan.file, on_error=lambda _file, _message: None
    )

    # Terminal editors own the terminal until they exit
    if not (wait or is_terminal_editor(plan.editor.command) or future.done()):
        return
    try:
        future.result().raise_for_error()
    except IdeLaunchError as e:
        raise IdeLaunchCliError(
            f"Could not open {Path(plan.file).name} in the editor: {e.message}",
            hint=CONFIGURE_EDITOR_HINT,
        ) from e


@cli.command()
@click.option("--editor", "-e", default=None, help="Preferred editor name or command.")
@handle_cli_errors("which")
def which(editor: str | None) -> None:
    """Print the editor command that would be launched."""
    from idelaunch.adapters.factory import LaunchFactory

    resolver = LaunchFactory().create_resolver()
    identity = resolver.resolve(editor or _load_config().editor)
    if identity is None or identity.command.lower() == "none":
        editor_not_resolved_error()
    click.echo(_format_argv(identity.argv()))


@cli.command()
@click.argument("target", type=str)
@_launch_options
@handle_cli_errors("args")
def args(
    target: str,
    line: int | None,
    column: int | None,
    editor: str | None,
    method: str | None,
    formats: tuple[str, ...],
) -> None:
    """Print the command that would open TARGET, one argument per line.

    Nothing is launched and the file does not need to exist.
    """
    from idelaunch.adapters.factory import LaunchFactory

    request = _build_request(target, line, column, editor, method, formats, _load_config())
    plan = LaunchFactory().create_pipeline().plan(request)
    for arg in plan.argv:
        click.echo(arg)


@cli.command()
def editors() -> None:
    """List the editors idelaunch can detect on this platform."""
    from idelaunch.core.arguments import EDITOR_FAMILIES
    from idelaunch.domain.editors import get_platform_family, known_editor_names

    family_of = {
        name: family
        for family, spec in EDITOR_FAMILIES.items()
        for name in spec["editors"]
    }
    for name in known_editor_names(get_platform_family()):
        family = family_of.get(name, "file-line-column")
        click.echo(f"{name:<16} {click.style(family, dim=True)}")


@cli.group()
def config() -> None:
    """Manage idelaunch configuration.

    The global config file holds defaults for --editor, --method and
    --format. CODE_EDITOR in the environment or in .env.local still takes
    precedence when choosing the editor.
    """
    pass


def _display_path_status(path: Path, label: str) -> None:
    """Display a config path with its existence status."""
    status = "exists" if path.exists() else "not created"
    color = "green" if path.exists() else "yellow"
    click.echo(f"{label}{path}")
    click.echo(f"  Status: {click.style(status, fg=color)}")


def _display_config_summary(config: LaunchConfig) -> None:
    """Display a summary of config settings."""
    click.echo("  [launch]")
    click.echo(f"    editor = {config.editor or '(auto)'}")
    click.echo(f"    method = {config.method or '(unset)'}")
    click.echo(f"    format = {config.format or '(editor default)'}")


@config.command(name="show")
@click.pass_context
@handle_cli_errors("config show")
def config_show(ctx: click.Context) -> None:
    """Show the config file location and current settings."""
    from idelaunch.shared.config_io import get_global_config_path

    global_path = get_global_config_path()
    _display_path_status(global_path, "Global config: ")
    click.echo("\nEffective configuration:")
    _display_config_summary(_load_config())


@config.command(name="path")
@handle_cli_errors("config path")
def config_path() -> None:
    """Print the config file path for use in scripts."""
    from idelaunch.shared.config_io import get_global_config_path

    click.echo(get_global_config_path())


@config.command(name="init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
@handle_cli_errors("config init")
def config_init(force: bool) -> None:
    """Create a commented config file with every option unset."""
    from idelaunch.shared.config_io import (
        create_default_config_file,
        get_global_config_path,
    )

    path = get_global_config_path()
    if path.exists() and not force:
        raise IdeLaunchCliError(
            f"Config already exists at {path}",
            hint="Use --force to overwrite it",
        )
    create_default_config_file(path)
    click.echo(f"Created {path}")


def _update_config(key: str, value: str | list[str] | None) -> Path:
    """Write one [launch] value to the global config file."""
    from dataclasses import replace

    from idelaunch.domain.config import LaunchConfig
    from idelaunch.shared.config_io import (
        get_global_config_path,
        load_config,
        save_config,
    )

    path = get_global_config_path()
    current = load_config(path) if path.exists() else LaunchConfig.default()
    save_config(replace(current, **{key: value}), path)
    return path


@config.command(name="set")
@click.argument("key", type=click.Choice(["editor", "method", "format"]))
@click.argument("values", nargs=-1, required=True)
@handle_cli_errors("config set")
def config_set(key: str, values: tuple[str, ...]) -> None:
    """Set a launch default in the global config file.

    Several VALUES are only accepted for format, where they form a list.
    """
    if key != "format" and len(values) > 1:
        raise IdeLaunchCliError(f"{key} takes a single value")
    value = _format_option(values) if key == "format" else values[0]
    path = _update_config(key, value)
    click.echo(f"Set {key} in {path}")


@config.command(name="unset")
@click.argument("key", type=click.Choice(["editor", "method", "format"]))
@handle_cli_errors("config unset")
def config_unset(key: str) -> None:
    """Remove a launch default from the global config file."""
    path = _update_config(key, None)
    click.echo(f"Unset {key} in {path}")


def main() -> int:
    """Main entrypoint for the CLI."""
    try:
        cli(obj={})
        return 0
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
