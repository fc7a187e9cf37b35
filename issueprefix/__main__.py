"""Allow running issueprefix with ``python -m issueprefix``."""

from issueprefix.cli import app

if __name__ == "__main__":
    app()
