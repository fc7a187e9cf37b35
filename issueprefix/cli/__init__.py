"""CLI entry points for issueprefix.

- app: ``issueprefix`` with the run, extract and install commands
- hook_app: ``issueprefix-hook``, the prepare-commit-msg hook itself
"""

import typer

from issueprefix.cli.extract import extract_command
from issueprefix.cli.install import install_command
from issueprefix.cli.main import main_command
from issueprefix.cli.run import run_hook_command

# Main application
app = typer.Typer(
    name="issueprefix",
    help="issueprefix: prefix commit messages with the branch's issue",
    add_completion=False,
)

app.command("run")(run_hook_command)
app.command("extract")(extract_command)
app.command("install")(install_command)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)

# Single-command application invoked by git as the hook
hook_app = typer.Typer(
    name="issueprefix-hook",
    add_completion=False,
)
hook_app.command()(run_hook_command)


__all__ = [
    "app",
    "hook_app",
    "extract_command",
    "install_command",
    "main_command",
    "run_hook_command",
]
