"""Shared data types for simfs."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Stat"]

KIND_DIRECTORY = "directory"
KIND_FILE = "file"
KIND_SYMLINK = "symlink"


@dataclass(frozen=True)
class Stat:
    """Result of a stat or lstat call.

    Attributes:
        kind: One of "directory", "file" or "symlink".
        mtime: Modification time in seconds since the epoch. Treat as opaque.
        size: Payload size in bytes (0 for directories).
    """

    kind: str
    mtime: float
    size: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.kind not in (KIND_DIRECTORY, KIND_FILE, KIND_SYMLINK):
            raise ValueError(f"Unknown node kind: {self.kind}")
        if self.size < 0:
            raise ValueError("size cannot be negative")

    def is_directory(self) -> bool:
        return self.kind == KIND_DIRECTORY

    def is_file(self) -> bool:
        return self.kind == KIND_FILE

    def is_symbolic_link(self) -> bool:
        return self.kind == KIND_SYMLINK
