"""Shared test fixtures."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from simfs.memory import SimulatedFileSystem
from simfs.pytest_plugin import simfs, simfs_callbacks, simfs_loop  # noqa: F401


# ============================================================================
# Tree Fixtures
# ============================================================================


@pytest.fixture
def sample_tree() -> dict[str, Any]:
    """Tree with directories, files and symbolic links."""
    return {
        "tmp": {
            "existing": {},
            "notes.txt": "hello world",
            "data.bin": b"\x00\x01\x02",
        },
        "home": {
            "user": {
                "docs": {"readme.md": "# Readme"},
            },
        },
        "latest": {"SYMLINK": "/tmp/existing"},
        "docs": {"SYMLINK": "/home/user/docs"},
        "notes": {"SYMLINK": "/tmp/notes.txt"},
    }


@pytest.fixture
def populated_fs(
    simfs: SimulatedFileSystem,  # noqa: F811
    sample_tree: dict[str, Any],
) -> SimulatedFileSystem:
    """Simulated filesystem holding ``sample_tree``."""
    simfs.set_mock_filesystem(sample_tree)
    return simfs


@pytest.fixture
def fixture_file(tmp_path: Path) -> Path:
    """Write a small YAML fixture file."""
    path = tmp_path / "tree.yaml"
    path.write_text(
        "tmp:\n"
        "  existing: {}\n"
        "  notes.txt: hello world\n"
        "latest:\n"
        "  SYMLINK: /tmp/existing\n"
    )
    return path


# ============================================================================
# Event Loop Helpers
# ============================================================================


@pytest.fixture
def collect(
    simfs_loop: asyncio.AbstractEventLoop,  # noqa: F811
) -> Callable[..., tuple[Any, ...]]:
    """Run a callback-style operation and return its callback arguments.

    Fails the test if the callback fires before the operation returns.
    """

    def run(operation: Callable[..., None], *args: Any) -> tuple[Any, ...]:
        future = simfs_loop.create_future()

        def callback(*result: Any) -> None:
            future.set_result(result)

        operation(*args, callback)
        assert not future.done(), "callback fired before the call returned"
        return simfs_loop.run_until_complete(future)

    return run
