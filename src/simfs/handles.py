"""Cursor-based file handles returned by ``open``."""

from __future__ import annotations

from dataclasses import dataclass

from simfs.errors import InvalidArgument

__all__ = ["FileHandle"]


@dataclass(eq=False)
class FileHandle:
    """Opaque handle wrapping a file payload and a read cursor.

    Attributes:
        path: Path the handle was opened with.
        buffer: Backing bytes (None once closed).
        position: Zero-based read cursor (None once closed).
    """

    path: str
    buffer: bytes | None
    position: int | None = 0

    @property
    def closed(self) -> bool:
        """Check if the handle has been closed."""
        return self.buffer is None

    def read_into(
        self,
        target: bytearray | memoryview,
        offset: int,
        length: int,
        position: int | None = None,
    ) -> int:
        """Copy bytes from the handle into a writable buffer.

        Args:
            target: Destination buffer.
            offset: Index in ``target`` to start writing at.
            length: Maximum number of bytes to copy.
            position: Source index, or None/negative to read from the cursor.

        Returns:
            Number of bytes copied. The cursor moves to just after them.

        Raises:
            InvalidArgument: If the handle is closed or the arguments do not
                describe a valid copy.
        """
        if self.buffer is None or self.position is None:
            raise InvalidArgument(self.path)
        if position is None or position < 0:
            position = self.position
        if length < 0 or offset < 0 or offset > len(target):
            raise InvalidArgument(self.path)

        chunk = self.buffer[position : position + length]
        count = min(len(chunk), len(target) - offset)
        target[offset : offset + count] = chunk[:count]
        self.position = position + count
        return count

    def close(self) -> None:
        """Invalidate the backing buffer and cursor.

        Raises:
            InvalidArgument: If the handle is already closed.
        """
        if self.buffer is None:
            raise InvalidArgument(self.path)
        self.buffer = None
        self.position = None
