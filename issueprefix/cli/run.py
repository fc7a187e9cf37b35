"""CLI command that runs the prepare-commit-msg hook."""

from typing import Optional

import typer

from issueprefix.hook import run_prepare_commit_msg_hook


def run_hook_command(
    commit_msg_file: Optional[str] = typer.Argument(
        None,
        help="Path to the commit message file (passed by git)",
    ),
    commit_source: Optional[str] = typer.Argument(
        None,
        help="Source of the commit message (passed by git, ignored)",
        show_default=False,
    ),
    commit_sha: Optional[str] = typer.Argument(
        None,
        help="Commit SHA when amending (passed by git, ignored)",
        show_default=False,
    ),
) -> None:
    """Prefix the commit message with the issue from the current branch."""
    exit_code = run_prepare_commit_msg_hook(commit_msg_file)
    raise typer.Exit(exit_code)
