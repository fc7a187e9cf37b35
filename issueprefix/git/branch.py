"""Current branch lookup.

Contains:
- get_branch_name: Get the current branch name, or None if unavailable
"""

from typing import Optional

from issueprefix.constants import BRANCH_NAME_ARGS
from issueprefix.git.runner import CommandRunner, run_git_command


def get_branch_name(run_command: CommandRunner = run_git_command) -> Optional[str]:
    """Get the current branch name without raising errors.

    Any failure of the command runner (git missing, not a repository,
    non-zero exit) collapses to None, as does empty output.

    Args:
        run_command: Capability that runs git and returns its stdout bytes.

    Returns:
        The trimmed branch name, or None if it cannot be determined.
    """
    try:
        output = run_command(BRANCH_NAME_ARGS)
        branch = output.decode("utf-8", errors="replace").strip()
    except Exception:
        return None
    return branch or None
