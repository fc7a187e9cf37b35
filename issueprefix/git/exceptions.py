"""Git-related exception classes.

Contains:
- GitError: Base exception for git-related errors
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass
