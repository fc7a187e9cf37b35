"""Installation of the prepare-commit-msg hook into a repository.

Contains:
- HookInstallError: Raised when the hook cannot be installed
- render_hook_script: Build the hook script contents
- is_issueprefix_hook: Check whether a hook file was written by issueprefix
- install_hook: Write the hook into the repository's hooks directory
"""

import stat
from pathlib import Path
from typing import Optional

from issueprefix.constants import HOOK_MARKER, HOOK_NAME, HOOK_SCRIPT_TEMPLATE
from issueprefix.git import CommandRunner, get_hooks_dir, run_git_command


class HookInstallError(Exception):
    """Raised when the hook cannot be installed."""

    pass


def render_hook_script(command: str = "issueprefix-hook") -> str:
    """Build the contents of the prepare-commit-msg script.

    Args:
        command: Executable the script hands its arguments to.

    Returns:
        The shell script text.
    """
    return HOOK_SCRIPT_TEMPLATE.format(marker=HOOK_MARKER, command=command)


def is_issueprefix_hook(hook_path: Path) -> bool:
    """Check whether an existing hook file was written by issueprefix."""
    try:
        return HOOK_MARKER in hook_path.read_text(encoding="utf-8")
    except (OSError, UnicodeError):
        return False


def install_hook(
    hooks_dir: Optional[Path] = None,
    force: bool = False,
    run_command: CommandRunner = run_git_command,
) -> Path:
    """Install the prepare-commit-msg hook.

    Args:
        hooks_dir: Hooks directory to install into. Defaults to the current
            repository's hooks directory.
        force: Replace an existing hook that was not written by issueprefix.
        run_command: Capability used to run git when locating the hooks directory.

    Returns:
        Path to the installed hook.

    Raises:
        GitError: If the hooks directory cannot be located.
        HookInstallError: If a foreign hook exists or the file cannot be written.
    """
    if hooks_dir is None:
        hooks_dir = get_hooks_dir(run_command)

    hook_path = hooks_dir / HOOK_NAME
    if hook_path.exists() and not force and not is_issueprefix_hook(hook_path):
        raise HookInstallError(
            f"A {HOOK_NAME} hook already exists at {hook_path}. Use --force to replace it."
        )

    try:
        hooks_dir.mkdir(parents=True, exist_ok=True)
        hook_path.write_text(render_hook_script(), encoding="utf-8")
        mode = hook_path.stat().st_mode
        hook_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    except OSError as e:
        raise HookInstallError(f"Failed to write hook to {hook_path}: {e}")

    return hook_path
