"""CLI command for showing the issue extracted from a branch."""

from typing import Optional

import typer

from issueprefix.git import get_branch_name
from issueprefix.issues import match_issue


def extract_command(
    branch: Optional[str] = typer.Argument(
        None,
        help="Branch name to inspect (defaults to the current branch)",
    ),
    show_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the match as JSON, including the rule that matched",
    ),
) -> None:
    """Show the issue identifier found in a branch name."""
    if branch is None:
        branch = get_branch_name()
        if branch is None:
            typer.echo("Could not determine branch name.", err=True)
            raise typer.Exit(1)

    found = match_issue(branch)
    if found is None:
        typer.echo("No issue number found in branch.", err=True)
        raise typer.Exit(1)

    if show_json:
        typer.echo(found.model_dump_json(indent=2))
    else:
        typer.echo(found.issue_id)
