"""Git prepare-commit-msg hook that prefixes commit messages with the branch's issue."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("issueprefix")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
