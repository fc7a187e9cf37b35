"""Ordered extraction rules for issue identifiers.

Each rule pairs a regex with a normalizer and a guard. Rules are evaluated
in order and the first rule whose pattern matches and whose guard accepts
the match wins. Only the first occurrence of each pattern is considered.
Digits and whitespace are matched as ASCII only.

Rules:
- jira: ``PROJ-123`` anywhere in the branch, returned verbatim
- issue-marker: ``issue-123``, ``ISSUE_123``, ``issue123``, normalized to ``Issue-123``
- bare-number: ``123``, ``feature/123``, ``hotfix/123-...``, normalized to ``Issue-123``
"""

import re
from dataclasses import dataclass
from typing import Callable

from issueprefix.constants import ISSUE_PREFIX


def _always(match: re.Match, branch: str) -> bool:
    return True


def _verbatim(match: re.Match, branch: str) -> str:
    return match.group(0)


def _issue_number(match: re.Match, branch: str) -> str:
    return f"{ISSUE_PREFIX}-{match.group(1)}"


@dataclass(frozen=True)
class IssueRule:
    """A single extraction rule.

    Attributes:
        name: Short identifier for the rule.
        pattern: Compiled regex searched for in the branch name.
        normalize: Builds the issue identifier from the match and branch.
        applies: Guard deciding whether the match is accepted.
    """

    name: str
    pattern: re.Pattern
    normalize: Callable[[re.Match, str], str] = _verbatim
    applies: Callable[[re.Match, str], bool] = _always


def _normalize_issue_marker(match: re.Match, branch: str) -> str:
    # An exact uppercase ISSUE-<n> branch is already canonical
    if branch == f"ISSUE-{match.group(1)}":
        return branch
    return _issue_number(match, branch)


def _bare_number_allowed(match: re.Match, branch: str) -> bool:
    number = match.group(1)
    if branch == number:
        return True
    if branch.startswith("feature/") and branch.endswith(number):
        return True
    return branch.startswith("hotfix/")


JIRA_RULE = IssueRule(
    name="jira",
    pattern=re.compile(r"[A-Z]+-\d+", re.ASCII),
)

ISSUE_MARKER_RULE = IssueRule(
    name="issue-marker",
    pattern=re.compile(r"issue[-_]?(\d+)", re.ASCII | re.IGNORECASE),
    normalize=_normalize_issue_marker,
)

BARE_NUMBER_RULE = IssueRule(
    name="bare-number",
    pattern=re.compile(r"(?:^|\D)(\d+)(?=\Z|[\s/_-])", re.ASCII),
    normalize=_issue_number,
    applies=_bare_number_allowed,
)

# Order is significant: first match wins.
DEFAULT_RULES: tuple[IssueRule, ...] = (
    JIRA_RULE,
    ISSUE_MARKER_RULE,
    BARE_NUMBER_RULE,
)
