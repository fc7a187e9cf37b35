"""CLI command for installing the hook into the current repository."""

import typer

from issueprefix.git import GitError
from issueprefix.install import HookInstallError, install_hook


def install_command(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Replace an existing prepare-commit-msg hook",
    ),
) -> None:
    """Install issueprefix as the repository's prepare-commit-msg hook."""
    try:
        hook_path = install_hook(force=force)
    except (GitError, HookInstallError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Installed prepare-commit-msg hook at {hook_path}")
