"""Main callback for the issueprefix CLI."""

import typer

from issueprefix import __version__


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"issueprefix {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Prefix commit messages with the issue from the current branch."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    typer.echo(ctx.get_help())
