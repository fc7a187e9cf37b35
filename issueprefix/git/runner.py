"""Git command runner and repository utilities.

Contains:
- run_git_command: Run a git command and return its raw output
- get_hooks_dir: Get the hooks directory of the current repository
"""

import subprocess
from pathlib import Path
from typing import Callable

from issueprefix.constants import HOOKS_PATH_ARGS
from issueprefix.git.exceptions import GitError

# Capability for executing git: receives the git arguments, returns raw stdout.
CommandRunner = Callable[[list[str]], bytes]


def run_git_command(args: list[str]) -> bytes:
    """Run a git command and return its raw output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command as bytes.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            check=True,
        )
        return result.stdout
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def get_hooks_dir(run_command: CommandRunner = run_git_command) -> Path:
    """Get the hooks directory of the current git repository.

    Honours ``core.hooksPath``. A relative result is resolved against the
    current working directory, which is what git reports it relative to.

    Returns:
        Path to the hooks directory.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        output = run_command(HOOKS_PATH_ARGS)
    except GitError:
        raise GitError("Not in a git repository. Please run this command from within a git repo.")
    return Path(output.decode("utf-8").strip()).resolve()
