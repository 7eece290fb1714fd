"""Protocol definitions for filesystem implementations.

Helpers that touch the filesystem accept any object satisfying
``FileSystem``. Production code passes a ``RealFileSystem``; tests pass a
``SimulatedFileSystem`` pre-populated with the tree they need.

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from simfs.types import Stat


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for synchronous filesystem operations.

    Every path is absolute. Failures raise the exceptions in ``simfs.errors``
    (or the built-in ``OSError`` subclasses they derive from).
    """

    def realpath(self, path: str) -> str:
        """Resolve a path, returning a symbolic link's target.

        Args:
            path: Path to resolve.

        Returns:
            The link target if ``path`` is a symbolic link, otherwise ``path``.

        Raises:
            FileNotFoundError: If the path does not exist.
        """
        ...

    def listdir(self, path: str) -> list[str]:
        """List the names in a directory.

        Args:
            path: Directory path. A trailing symbolic link is followed.

        Returns:
            Child names.

        Raises:
            FileNotFoundError: If the path does not exist.
            NotADirectoryError: If the path is not a directory.
        """
        ...

    def read_file(self, path: str, encoding: str | None = None) -> str | bytes:
        """Read the contents of a file.

        Args:
            path: File path.
            encoding: Decode to text when given.

        Returns:
            File contents.

        Raises:
            FileNotFoundError: If the file does not exist.
            IsADirectoryError: If the path is a directory.
        """
        ...

    def write_file(self, path: str, data: str | bytes) -> None:
        """Create or replace a file.

        Args:
            path: File path. The parent directory must exist.
            data: Contents to write.

        Raises:
            FileNotFoundError: If the parent directory does not exist.
        """
        ...

    def mkdir(self, path: str) -> None:
        """Create a single directory.

        Args:
            path: Directory path. The parent directory must exist.

        Raises:
            FileExistsError: If the path already exists.
            FileNotFoundError: If the parent directory does not exist.
        """
        ...

    def stat(self, path: str) -> Stat:
        """Get information about a path, following symbolic links.

        Args:
            path: Path to inspect.

        Returns:
            Stat for the link target or the node itself.
        """
        ...

    def lstat(self, path: str) -> Stat:
        """Get information about a path without following a final link.

        Args:
            path: Path to inspect.

        Returns:
            Stat for the node itself.
        """
        ...

    def exists(self, path: str) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...
