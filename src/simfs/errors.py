"""Error types raised by the simulated filesystem.

Each error derives from both ``SimFSError`` and the built-in exception a
real filesystem call would raise, so code under test can keep catching
``FileNotFoundError`` and friends.
"""

from __future__ import annotations

import errno

__all__ = [
    "AlreadyExists",
    "InvalidArgument",
    "IsADirectory",
    "NotADirectory",
    "NotAbsolute",
    "NotFound",
    "SimFSError",
    "SymlinkLoop",
]


class SimFSError(Exception):
    """Base class for simulated filesystem errors."""

    pass


class _OSFailure(SimFSError, OSError):
    """Error carrying an errno code and the offending path."""

    code: int = errno.EIO
    reason: str = "I/O error"

    def __init__(self, path: str | None = None, reason: str | None = None) -> None:
        super().__init__(self.code, reason or self.reason, path)

    def __str__(self) -> str:
        name = errno.errorcode.get(self.errno, "EIO")
        if self.filename is None:
            return f"{name}: {self.strerror}"
        return f"{name}: {self.strerror}, {self.filename}"


class NotFound(_OSFailure, FileNotFoundError):
    """Path or one of its ancestors does not exist."""

    code = errno.ENOENT
    reason = "no such file or directory"


class NotADirectory(_OSFailure, NotADirectoryError):
    """Expected a directory, found a file or a symbolic link."""

    code = errno.ENOTDIR
    reason = "not a directory"


class IsADirectory(_OSFailure, IsADirectoryError):
    """Expected file contents, found a directory."""

    code = errno.EISDIR
    reason = "illegal operation on a directory"


class AlreadyExists(_OSFailure, FileExistsError):
    """Directory creation target already exists."""

    code = errno.EEXIST
    reason = "file already exists"


class InvalidArgument(_OSFailure):
    """File handle misuse in read or close."""

    code = errno.EINVAL
    reason = "invalid argument"


class SymlinkLoop(_OSFailure):
    """Too many symbolic links were followed while resolving a path."""

    code = errno.ELOOP
    reason = "too many symbolic links encountered"


class NotAbsolute(SimFSError, ValueError):
    """Path does not start with a separator."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Make sure all paths are absolute: {path!r}")
        self.path = path
