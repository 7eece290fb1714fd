"""Pytest fixtures for tests that use a simulated filesystem.

Registered through the ``pytest11`` entry point, so installing simfs makes
the ``simfs`` and ``simfs_callbacks`` fixtures available everywhere.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterator

import pytest

from simfs.callbacks import CallbackFileSystem
from simfs.memory import SimulatedFileSystem


@pytest.fixture
def simfs() -> SimulatedFileSystem:
    """Create an empty simulated filesystem, fresh for each test."""
    return SimulatedFileSystem()


@pytest.fixture
def simfs_loop() -> Iterator[asyncio.AbstractEventLoop]:
    """Create a private event loop for callback-style operations."""
    loop = asyncio.new_event_loop()
    try:
        yield loop
    finally:
        loop.close()


@pytest.fixture
def simfs_callbacks(
    simfs: SimulatedFileSystem, simfs_loop: asyncio.AbstractEventLoop
) -> CallbackFileSystem:
    """Create a callback facade over the ``simfs`` fixture's tree."""
    return CallbackFileSystem(simfs, loop=simfs_loop)
