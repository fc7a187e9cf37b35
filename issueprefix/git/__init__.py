"""Git access for issueprefix.

This package provides:
- exceptions: GitError
- runner: run_git_command, get_hooks_dir, CommandRunner
- branch: get_branch_name
"""

from issueprefix.git.exceptions import GitError
from issueprefix.git.runner import (
    CommandRunner,
    get_hooks_dir,
    run_git_command,
)
from issueprefix.git.branch import get_branch_name


__all__ = [
    "GitError",
    "CommandRunner",
    "get_hooks_dir",
    "run_git_command",
    "get_branch_name",
]
