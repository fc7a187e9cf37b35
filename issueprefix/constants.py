"""Constants for issueprefix.

Contains:
- BRANCH_NAME_ARGS: git arguments used to read the current branch
- HOOKS_PATH_ARGS: git arguments used to locate the hooks directory
- ISSUE_SEPARATOR: Separator placed between the issue and the message
- Hook outcome messages written to the info and error sinks
- HOOK_SCRIPT_TEMPLATE: Script written by ``issueprefix install``
"""

BRANCH_NAME_ARGS = ["rev-parse", "--abbrev-ref", "HEAD"]
HOOKS_PATH_ARGS = ["rev-parse", "--git-path", "hooks"]

HOOK_NAME = "prepare-commit-msg"

ISSUE_SEPARATOR = " | "

# Canonical prefix used when an issue marker or bare number is normalized
ISSUE_PREFIX = "Issue"

# Hook outcome lines
MSG_MISSING_PATH = "No commit message file path provided."
MSG_NO_BRANCH = "Could not determine branch name. Skipping prefixing."
MSG_NO_ISSUE = "No issue number found in branch. Skipping prefixing."
MSG_FILE_ERROR = "Error reading or writing commit message file: {error}"
MSG_PREFIXED = "Commit message prefixed with: {issue_id}"
MSG_ALREADY_PREFIXED = "Commit message already contains issue prefix: {issue_id}"

# Marker line identifying hooks written by issueprefix
HOOK_MARKER = "# installed by issueprefix"

HOOK_SCRIPT_TEMPLATE = """#!/bin/sh
{marker}
exec {command} "$@"
"""
