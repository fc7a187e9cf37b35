"""Tests for issueprefix.issues module."""

import re

import pytest

from issueprefix.issues import (
    BARE_NUMBER_RULE,
    DEFAULT_RULES,
    ISSUE_MARKER_RULE,
    JIRA_RULE,
    IssueRule,
    extract_issue_id,
    match_issue,
)
from issueprefix.models import IssueMatch


class TestExtractIssueMarker:
    """Tests for issue-marker branches."""

    def test_lowercase_issue(self):
        """Test issue-123 is normalized."""
        assert extract_issue_id("issue-123") == "Issue-123"

    def test_exact_uppercase_issue_kept(self):
        """Test that an exact ISSUE-456 branch is kept as is."""
        assert extract_issue_id("ISSUE-456") == "ISSUE-456"

    def test_issue_inside_path(self):
        """Test that issue markers inside a path are found."""
        assert extract_issue_id("feature/issue-789") == "Issue-789"
        assert extract_issue_id("feature/issue-123-add-feature") == "Issue-123"

    def test_underscore_and_no_separator(self):
        """Test issue_ and bare issue markers."""
        assert extract_issue_id("ISSUE_456") == "Issue-456"
        assert extract_issue_id("fix/issue77") == "Issue-77"

    def test_mixed_case_marker(self):
        """Test that the marker is matched case-insensitively."""
        assert extract_issue_id("bugfix/Issue_12-typo") == "Issue-12"


class TestExtractJira:
    """Tests for JIRA-style branches."""

    def test_plain_key(self):
        """Test a branch that is just a key."""
        assert extract_issue_id("PROJ-123") == "PROJ-123"

    def test_key_in_path(self):
        """Test keys after a branch type prefix."""
        assert extract_issue_id("feature/PROJ-456") == "PROJ-456"
        assert extract_issue_id("bugfix/ABC-789") == "ABC-789"
        assert extract_issue_id("bugfix/PROJ-456-fix-bug") == "PROJ-456"

    def test_first_key_wins(self):
        """Test that the first key in the branch is used."""
        assert extract_issue_id("feature/ABC-1-and-DEF-2") == "ABC-1"

    def test_jira_beats_issue_marker(self):
        """Test that a JIRA key is preferred over an issue marker."""
        assert extract_issue_id("issue-5/ABC-9") == "ABC-9"

    def test_embedded_uppercase_issue_is_jira(self):
        """Test that ISSUE-n inside a longer branch matches as a JIRA key."""
        assert extract_issue_id("feature/ISSUE-456") == "ISSUE-456"


class TestExtractBareNumber:
    """Tests for bare-number branches."""

    def test_branch_is_number(self):
        """Test a branch that is just a number."""
        assert extract_issue_id("123") == "Issue-123"

    def test_feature_number(self):
        """Test feature/<number>."""
        assert extract_issue_id("feature/456") == "Issue-456"

    def test_hotfix_number(self):
        """Test hotfix/<number>-description."""
        assert extract_issue_id("hotfix/123-critical-fix") == "Issue-123"
        assert extract_issue_id("hotfix/crash_88") == "Issue-88"

    def test_issue_marker_beats_bare_number(self):
        """Test that an explicit issue marker wins over a bare number."""
        assert extract_issue_id("hotfix/7-issue-99") == "Issue-99"

    @pytest.mark.parametrize(
        "branch",
        [
            "bugfix/update-42-readme",
            "feature/456-login",
            "release/1.2",
            "feature/v2/login",
            "42abc",
        ],
    )
    def test_other_shapes_do_not_match(self, branch):
        """Test that numbers outside the allowed shapes are ignored."""
        assert extract_issue_id(branch) is None


class TestExtractNoMatch:
    """Tests for branches without an issue."""

    @pytest.mark.parametrize("branch", ["main", "develop", "feature/update-readme", "HEAD"])
    def test_returns_none(self, branch):
        """Test that no issue yields None."""
        assert extract_issue_id(branch) is None

    @pytest.mark.parametrize(
        "branch",
        ["feature/٤٥٦", "٤٥٦", "hotfix/١٢-crash", "issue-٧", "PROJ-٣"],
    )
    def test_non_ascii_digits_ignored(self, branch):
        """Test that only ASCII digits form issue numbers."""
        assert extract_issue_id(branch) is None

    def test_non_ascii_case_folding_ignored(self):
        """Test that the issue marker does not match dotless i or long s lookalikes."""
        assert extract_issue_id("bugfix/ıssue-5") is None
        assert extract_issue_id("bugfix/iſſue-5") is None


class TestMatchIssue:
    """Tests for match_issue function."""

    def test_reports_rule(self):
        """Test that the matching rule is reported."""
        assert match_issue("feature/PROJ-1") == IssueMatch(
            branch="feature/PROJ-1", issue_id="PROJ-1", rule="jira"
        )
        assert match_issue("issue-3").rule == "issue-marker"
        assert match_issue("feature/3").rule == "bare-number"

    def test_returns_none(self):
        """Test that no match yields None."""
        assert match_issue("main") is None

    def test_custom_rules(self):
        """Test that rules can be supplied."""
        rule = IssueRule(name="gh", pattern=re.compile(r"gh-(\d+)"))

        found = match_issue("feature/gh-12", rules=[rule])

        assert found.issue_id == "gh-12"
        assert found.rule == "gh"

    def test_guard_rejection_falls_through(self):
        """Test that a rejected match lets later rules run."""
        rejecting = IssueRule(
            name="never",
            pattern=re.compile(r"\d+"),
            applies=lambda match, branch: False,
        )

        found = match_issue("issue-4", rules=[rejecting, ISSUE_MARKER_RULE])

        assert found.issue_id == "Issue-4"

    def test_exact_uppercase_issue_without_jira_rule(self):
        """Test that the issue-marker rule keeps an exact ISSUE-<n> branch verbatim."""
        rules = [ISSUE_MARKER_RULE, BARE_NUMBER_RULE]

        assert match_issue("ISSUE-456", rules=rules).issue_id == "ISSUE-456"
        assert match_issue("feature/ISSUE-456", rules=rules).issue_id == "Issue-456"
        assert match_issue("Issue-456", rules=rules).issue_id == "Issue-456"


class TestDefaultRules:
    """Tests for the default rule list."""

    def test_order(self):
        """Test that rules are evaluated jira, issue marker, bare number."""
        assert DEFAULT_RULES == (JIRA_RULE, ISSUE_MARKER_RULE, BARE_NUMBER_RULE)

    def test_bare_number_guard_only_checks_first_number(self):
        """Test that the bare-number guard looks at the first number only."""
        match = BARE_NUMBER_RULE.pattern.search("feature/1-then/2")

        assert match.group(1) == "1"
        assert BARE_NUMBER_RULE.applies(match, "feature/1-then/2") is False
