"""User-facing remediation messages printed when no error callback is given."""

import ntpath

import click

from idelaunch.domain.config import EDITOR_ENV_KEY, LOCAL_ENV_FILENAME


def setup_hint() -> str:
    """Explain how to configure the editor, with click styling."""
    return (
        "To set up the editor integration, add something like "
        + click.style(f"{EDITOR_ENV_KEY}=code", fg="cyan")
        + " to the "
        + click.style(LOCAL_ENV_FILENAME, fg="green")
        + " file in your project folder, or pass "
        + click.style('editor="code"', fg="green")
        + " (or --editor code) to idelaunch, and then restart the development server."
    )


def print_unrecognized_editor() -> None:
    """Print instructions after automatic editor detection failed."""
    click.echo(
        "Failed to recognize IDE automatically. " + setup_hint(),
        err=True,
    )


def print_instructions(file: str, error_message: str | None) -> None:
    """Print why ``file`` could not be opened and how to fix the setup.

    Args:
        file: File that failed to open.
        error_message: Process error, such as ``"(code 1)"``.
    """
    # ntpath handles both separators
    click.secho(
        f"Could not open {ntpath.basename(file)} in the editor.", fg="red", err=True
    )
    if error_message:
        if not error_message.endswith("."):
            error_message += "."
        click.secho(
            f"The editor process exited with an error: {error_message}",
            fg="red",
            err=True,
        )
    click.echo(setup_hint(), err=True)
