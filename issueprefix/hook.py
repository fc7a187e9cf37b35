"""prepare-commit-msg hook orchestration.

Contains:
- prepare_commit_message: Prefix the commit message file and describe the outcome
- run_prepare_commit_msg_hook: Run the hook, log the outcome and return the exit code
"""

from typing import Optional

from issueprefix.constants import (
    MSG_ALREADY_PREFIXED,
    MSG_FILE_ERROR,
    MSG_MISSING_PATH,
    MSG_NO_BRANCH,
    MSG_NO_ISSUE,
    MSG_PREFIXED,
)
from issueprefix.filesystem import FileSystem, LocalFileSystem
from issueprefix.git import CommandRunner, get_branch_name, run_git_command
from issueprefix.issues import extract_issue_id
from issueprefix.models import HookOutcome, HookStatus
from issueprefix.output import Sink, echo_error, echo_info
from issueprefix.prefix import prefix_commit_message


def prepare_commit_message(
    commit_msg_file: Optional[str],
    file_system: FileSystem,
    run_command: CommandRunner,
) -> HookOutcome:
    """Prefix the commit message file with the issue from the current branch.

    Branch and issue detection failures are skips, never errors: a commit
    is not blocked because no issue could be inferred. Only a missing path
    and file I/O failures are fatal.

    Args:
        commit_msg_file: Path to the commit message file passed by git.
        file_system: Capability used to read and write the message file.
        run_command: Capability used to run git.

    Returns:
        The outcome of the run.
    """
    if not commit_msg_file:
        return HookOutcome(status=HookStatus.MISSING_PATH, message=MSG_MISSING_PATH)

    branch = get_branch_name(run_command)
    if branch is None:
        return HookOutcome(status=HookStatus.NO_BRANCH, message=MSG_NO_BRANCH)

    issue_id = extract_issue_id(branch)
    if issue_id is None:
        return HookOutcome(status=HookStatus.NO_ISSUE, message=MSG_NO_ISSUE)

    try:
        message = file_system.read_text(commit_msg_file)
        prefixed = prefix_commit_message(message, issue_id)
        if prefixed == message:
            return HookOutcome(
                status=HookStatus.ALREADY_PREFIXED,
                message=MSG_ALREADY_PREFIXED.format(issue_id=issue_id),
                issue_id=issue_id,
            )
        file_system.write_text(commit_msg_file, prefixed)
    except Exception as e:
        return HookOutcome(
            status=HookStatus.FILE_ERROR,
            message=MSG_FILE_ERROR.format(error=e),
            issue_id=issue_id,
        )

    return HookOutcome(
        status=HookStatus.PREFIXED,
        message=MSG_PREFIXED.format(issue_id=issue_id),
        issue_id=issue_id,
    )


def run_prepare_commit_msg_hook(
    commit_msg_file: Optional[str],
    file_system: Optional[FileSystem] = None,
    run_command: CommandRunner = run_git_command,
    log: Sink = echo_info,
    error_log: Sink = echo_error,
) -> int:
    """Run the prepare-commit-msg hook.

    Exactly one line describing the outcome is written, to ``error_log``
    for errors and to ``log`` otherwise.

    Returns:
        0 on success or a benign skip, 1 on a hard failure.
    """
    if file_system is None:
        file_system = LocalFileSystem()

    outcome = prepare_commit_message(commit_msg_file, file_system, run_command)
    sink = error_log if outcome.is_error else log
    sink(outcome.message)
    return outcome.exit_code
