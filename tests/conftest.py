"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def commit_msg_file(temp_dir):
    """Create a commit message file with a plain message."""
    path = temp_dir / "COMMIT_EDITMSG"
    path.write_text("Update implementation", encoding="utf-8")
    return path


@pytest.fixture
def mock_fs():
    """In-memory stand-in for the file system capability."""
    fs = MagicMock()
    fs.read_text.return_value = "Update implementation"
    return fs


@pytest.fixture
def branch_runner():
    """Build a command runner that reports the given branch name."""

    def _make(branch: str) -> MagicMock:
        return MagicMock(return_value=f"{branch}\n".encode("utf-8"))

    return _make


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run
