"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

The filesystem is typed using the FileSystem Protocol rather than a concrete
implementation, so commands run against a simulated tree or the real disk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from simfs.config import SimFSConfig
from simfs.protocols import FileSystem


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from simfs.memory import SimulatedFileSystem
    return SimulatedFileSystem()


@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for the services used by CLI commands.
    For tests, construct AppContext directly with test doubles.
    """

    filesystem: FileSystem = field(default_factory=_default_filesystem)
    config: SimFSConfig = field(default_factory=SimFSConfig)
    fixture: Path | None = None


def create_context(
    fixture: Path | None = None,
    config_file: Path | None = None,
) -> AppContext:
    """Factory for application dependencies.

    Args:
        fixture: Fixture file to populate the simulated filesystem from.
        config_file: YAML settings file.

    Returns:
        Configured AppContext.
    """
    from simfs.fixtures import filesystem_from_file
    from simfs.memory import SimulatedFileSystem

    config = SimFSConfig.from_file(config_file) if config_file else SimFSConfig()
    filesystem = (
        filesystem_from_file(fixture, config)
        if fixture
        else SimulatedFileSystem(config=config)
    )
    return AppContext(filesystem=filesystem, config=config, fixture=fixture)
