"""Issue identifier extraction from branch names."""

from typing import Optional, Sequence

from issueprefix.issues.rules import DEFAULT_RULES, IssueRule
from issueprefix.models import IssueMatch


def match_issue(
    branch: str,
    rules: Sequence[IssueRule] = DEFAULT_RULES,
) -> Optional[IssueMatch]:
    """Find the issue identifier in a branch name.

    Args:
        branch: The branch name.
        rules: Ordered rules to evaluate, first match wins.

    Returns:
        The match with the rule that produced it, or None.
    """
    for rule in rules:
        match = rule.pattern.search(branch)
        if match and rule.applies(match, branch):
            return IssueMatch(
                branch=branch,
                issue_id=rule.normalize(match, branch),
                rule=rule.name,
            )
    return None


def extract_issue_id(branch: str) -> Optional[str]:
    """Extract the issue identifier from a branch name.

    Args:
        branch: The branch name.

    Returns:
        The issue identifier (e.g., "PROJ-123", "Issue-42") or None.
    """
    found = match_issue(branch)
    if found is None:
        return None
    return found.issue_id
