"""File system access for the commit message file.

Contains:
- FileSystem: Protocol for reading and writing the commit message
- LocalFileSystem: FileSystem backed by the local disk
"""

from typing import Protocol


class FileSystem(Protocol):
    """Read and write access to text files."""

    def read_text(self, path: str) -> str:
        ...

    def write_text(self, path: str, content: str) -> None:
        ...


class LocalFileSystem:
    """FileSystem implementation using UTF-8 files on disk.

    Line endings are left as they are in the file.
    """

    def read_text(self, path: str) -> str:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()

    def write_text(self, path: str, content: str) -> None:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
