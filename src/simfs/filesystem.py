"""Filesystem implementation backed by the real disk.

Helpers written against the FileSystem protocol run unchanged in
production by passing a RealFileSystem. It wraps standard library ``os``
and ``pathlib`` operations and raises their built-in exceptions.
"""

from __future__ import annotations

import errno
import os
import stat as stat_mod
from pathlib import Path

from simfs.types import KIND_DIRECTORY, KIND_FILE, KIND_SYMLINK, Stat


def _to_stat(result: os.stat_result) -> Stat:
    if stat_mod.S_ISLNK(result.st_mode):
        kind = KIND_SYMLINK
    elif stat_mod.S_ISDIR(result.st_mode):
        kind = KIND_DIRECTORY
    else:
        kind = KIND_FILE
    size = 0 if kind == KIND_DIRECTORY else result.st_size
    return Stat(kind=kind, mtime=result.st_mtime, size=size)


class RealFileSystem:
    """Production filesystem implementation.

    Satisfies the FileSystem protocol structurally.
    """

    def realpath(self, path: str) -> str:
        """Return a symbolic link's target, or the path itself."""
        if os.path.islink(path):
            return os.readlink(path)
        if not os.path.lexists(path):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        return path

    def listdir(self, path: str) -> list[str]:
        """List the names in a directory."""
        return os.listdir(path)

    def read_file(self, path: str, encoding: str | None = None) -> str | bytes:
        """Read the contents of a file."""
        if encoding is None:
            return Path(path).read_bytes()
        return Path(path).read_text(encoding=encoding)

    def write_file(self, path: str, data: str | bytes) -> None:
        """Create or replace a file."""
        if isinstance(data, bytes):
            Path(path).write_bytes(data)
        else:
            Path(path).write_text(data)

    def mkdir(self, path: str) -> None:
        """Create a single directory."""
        Path(path).mkdir()

    def stat(self, path: str) -> Stat:
        """Get information about a path, following symbolic links."""
        return _to_stat(os.stat(path))

    def lstat(self, path: str) -> Stat:
        """Get information about a path without following a final link."""
        return _to_stat(os.lstat(path))

    def exists(self, path: str) -> bool:
        """Check if a path exists."""
        return Path(path).exists()

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory."""
        return Path(path).is_dir()
