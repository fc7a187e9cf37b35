"""Data models for issueprefix.

Contains:
- IssueMatch: Pydantic model describing an issue extracted from a branch
- HookStatus: Terminal states of a prepare-commit-msg run
- HookOutcome: Pydantic model for the result of a prepare-commit-msg run
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class IssueMatch(BaseModel):
    """An issue identifier extracted from a branch name.

    Attributes:
        branch: The branch name that was inspected.
        issue_id: The normalized issue identifier (e.g., "PROJ-123", "Issue-42").
        rule: Name of the extraction rule that produced the match.
    """

    model_config = ConfigDict(frozen=True)

    branch: str
    issue_id: str
    rule: str


class HookStatus(Enum):
    """Terminal states of a prepare-commit-msg run."""

    PREFIXED = "prefixed"
    ALREADY_PREFIXED = "already_prefixed"
    NO_ISSUE = "no_issue"
    NO_BRANCH = "no_branch"
    MISSING_PATH = "missing_path"
    FILE_ERROR = "file_error"


# Statuses that fail the hook
_FATAL_STATUSES = {HookStatus.MISSING_PATH, HookStatus.FILE_ERROR}

# Statuses reported on the error sink
_ERROR_STATUSES = _FATAL_STATUSES | {HookStatus.NO_BRANCH}


class HookOutcome(BaseModel):
    """Result of a single prepare-commit-msg run.

    Attributes:
        status: The terminal state that was reached.
        message: The single line describing the outcome.
        issue_id: The issue identifier, when one was extracted.
    """

    model_config = ConfigDict(frozen=True)

    status: HookStatus
    message: str
    issue_id: Optional[str] = None

    @property
    def exit_code(self) -> int:
        """Process exit code for this outcome."""
        return 1 if self.status in _FATAL_STATUSES else 0

    @property
    def is_error(self) -> bool:
        """Whether the outcome line belongs on the error sink."""
        return self.status in _ERROR_STATUSES
