"""Issue identifier extraction.

This package provides:
- rules: IssueRule, DEFAULT_RULES and the individual rules
- extractor: match_issue, extract_issue_id
"""

from issueprefix.issues.rules import (
    BARE_NUMBER_RULE,
    DEFAULT_RULES,
    ISSUE_MARKER_RULE,
    JIRA_RULE,
    IssueRule,
)
from issueprefix.issues.extractor import extract_issue_id, match_issue


__all__ = [
    "IssueRule",
    "DEFAULT_RULES",
    "JIRA_RULE",
    "ISSUE_MARKER_RULE",
    "BARE_NUMBER_RULE",
    "match_issue",
    "extract_issue_id",
]
