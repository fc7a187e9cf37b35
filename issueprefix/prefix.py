"""Idempotent issue prefixing of commit messages."""

from issueprefix.constants import ISSUE_SEPARATOR


def has_issue_prefix(message: str, issue_id: str) -> bool:
    """Check whether a message already starts with the issue prefix.

    The comparison ignores case, so ``abc-123 | ...`` counts as prefixed
    with ``ABC-123``.
    """
    return message.lower().startswith(f"{issue_id}{ISSUE_SEPARATOR}".lower())


def prefix_commit_message(message: str, issue_id: str) -> str:
    """Prefix a commit message with an issue identifier.

    Args:
        message: The original commit message.
        issue_id: The issue identifier (e.g., "ABC-123").

    Returns:
        ``"<issue_id> | <message>"``, or the message unchanged if it already
        carries the prefix in any casing.
    """
    if has_issue_prefix(message, issue_id):
        return message
    return f"{issue_id}{ISSUE_SEPARATOR}{message}"
