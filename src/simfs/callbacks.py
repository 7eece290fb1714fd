"""Callback-style facade over a simulated filesystem.

Every operation runs synchronously against the tree and then schedules its
callback on the event loop with ``call_soon``. Callbacks therefore never run
before the initiating call has returned, which matches how a real
asynchronous filesystem API behaves.

Callbacks receive ``(error, result)``; on failure ``result`` is None.
``read`` calls back with ``(error, bytes_read, buffer)``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from simfs.errors import InvalidArgument, SimFSError
from simfs.handles import FileHandle
from simfs.memory import SimulatedFileSystem

logger = logging.getLogger(__name__)

Callback = Callable[..., Any]

# Raised by bad handles or destinations before any copy happens
_BAD_HANDLE_ARGUMENTS = (TypeError, AttributeError, ValueError, IndexError)


class CallbackFileSystem:
    """Deferred-callback operations over a ``SimulatedFileSystem``."""

    def __init__(
        self,
        filesystem: SimulatedFileSystem,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        """Initialize the facade.

        Args:
            filesystem: Filesystem whose tree the operations act on.
            loop: Event loop used to schedule callbacks. Defaults to the
                running loop at call time.
        """
        self.fs = filesystem
        self._loop = loop
        self.aio = AwaitableFileSystem(self)

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        """Get the loop callbacks are scheduled on."""
        return self._loop or asyncio.get_running_loop()

    def _dispatch(
        self, callback: Callback | None, operation: Callable[[], Any], arity: int = 1
    ) -> None:
        """Run an operation now and schedule its callback for a later turn.

        Args:
            callback: Completion callback, or None to discard the result.
            operation: Zero-argument callable performing the work.
            arity: Number of result values passed after the error.
        """
        try:
            result = operation()
        except SimFSError as e:
            logger.debug("Deferred operation failed: %s", e)
            args: tuple[Any, ...] = (e,) + (None,) * arity
        else:
            args = (None,) + (result if arity > 1 else (result,))
        if callback is not None:
            self.loop.call_soon(callback, *args)

    def realpath(self, path: str, callback: Callback) -> None:
        self._dispatch(callback, lambda: self.fs.realpath(path))

    def listdir(self, path: str, callback: Callback) -> None:
        self._dispatch(callback, lambda: self.fs.listdir(path))

    def read_file(
        self, path: str, callback: Callback, encoding: str | None = None
    ) -> None:
        self._dispatch(callback, lambda: self.fs.read_file(path, encoding))

    def write_file(self, path: str, data: str | bytes, callback: Callback) -> None:
        self._dispatch(callback, lambda: self.fs.write_file(path, data))

    def mkdir(self, path: str, callback: Callback) -> None:
        self._dispatch(callback, lambda: self.fs.mkdir(path))

    def stat(self, path: str, callback: Callback) -> None:
        self._dispatch(callback, lambda: self.fs.stat(path))

    def lstat(self, path: str, callback: Callback) -> None:
        self._dispatch(callback, lambda: self.fs.lstat(path))

    def open(self, path: str, callback: Callback) -> None:
        self._dispatch(callback, lambda: self.fs.open(path))

    def read(
        self,
        handle: FileHandle,
        buffer: bytearray | memoryview,
        offset: int,
        length: int,
        position: int | None,
        callback: Callback | None = None,
    ) -> None:
        """Copy bytes from an open handle into ``buffer``.

        Args:
            handle: Handle returned by ``open``.
            buffer: Writable destination.
            offset: Index in ``buffer`` to write at.
            length: Maximum number of bytes to copy.
            position: Source index, or None/negative for the handle's cursor.
            callback: Called with ``(error, bytes_read, buffer)``. An invalid
                handle or a read-only ``buffer`` reports ``InvalidArgument``.
        """

        def operation() -> tuple[int, bytearray | memoryview]:
            try:
                count = handle.read_into(buffer, offset, length, position)
            except _BAD_HANDLE_ARGUMENTS as e:
                raise InvalidArgument(getattr(handle, "path", None)) from e
            return count, buffer

        self._dispatch(callback, operation, arity=2)

    def close(self, handle: FileHandle, callback: Callback | None = None) -> None:
        def operation() -> None:
            try:
                handle.close()
            except _BAD_HANDLE_ARGUMENTS as e:
                raise InvalidArgument(getattr(handle, "path", None)) from e

        self._dispatch(callback, operation)


class AwaitableFileSystem:
    """Awaitable counterparts of the callback operations.

    Each method returns a future resolved by the same deferred callback, so
    awaiting always yields to the event loop at least once.
    """

    def __init__(self, callbacks: CallbackFileSystem) -> None:
        self._callbacks = callbacks

    def _call(
        self, name: str, *args: Any, arity: int = 1, **kwargs: Any
    ) -> asyncio.Future[Any]:
        future = self._callbacks.loop.create_future()

        def done(error: Exception | None, *result: Any) -> None:
            if future.cancelled():
                return
            if error is not None:
                future.set_exception(error)
            elif arity > 1:
                future.set_result(result)
            else:
                future.set_result(result[0])

        getattr(self._callbacks, name)(*args, done, **kwargs)
        return future

    def realpath(self, path: str) -> asyncio.Future[str]:
        return self._call("realpath", path)

    def listdir(self, path: str) -> asyncio.Future[list[str]]:
        return self._call("listdir", path)

    def read_file(
        self, path: str, encoding: str | None = None
    ) -> asyncio.Future[str | bytes]:
        return self._call("read_file", path, encoding=encoding)

    def write_file(self, path: str, data: str | bytes) -> asyncio.Future[None]:
        return self._call("write_file", path, data)

    def mkdir(self, path: str) -> asyncio.Future[None]:
        return self._call("mkdir", path)

    def stat(self, path: str) -> asyncio.Future[Any]:
        return self._call("stat", path)

    def lstat(self, path: str) -> asyncio.Future[Any]:
        return self._call("lstat", path)

    def open(self, path: str) -> asyncio.Future[FileHandle]:
        return self._call("open", path)

    def read(
        self,
        handle: FileHandle,
        buffer: bytearray | memoryview,
        offset: int,
        length: int,
        position: int | None = None,
    ) -> asyncio.Future[tuple[int, bytearray | memoryview]]:
        return self._call("read", handle, buffer, offset, length, position, arity=2)

    def close(self, handle: FileHandle) -> asyncio.Future[None]:
        return self._call("close", handle)
