"""Directory-creation helper built on the FileSystem protocol."""

from __future__ import annotations

import logging

from simfs.errors import NotADirectory
from simfs.paths import split_path
from simfs.protocols import FileSystem

logger = logging.getLogger(__name__)


def make_dirs(fs: FileSystem, path: str) -> list[str]:
    """Create a directory and any missing ancestors.

    Only ``stat`` and ``mkdir`` are used, so this works against any
    FileSystem implementation.

    Args:
        fs: Filesystem to create the directories in.
        path: Absolute path of the directory to create.

    Returns:
        Paths that were created, outermost first. Empty if the directory
        already existed.

    Raises:
        NotADirectory: If an existing component is not a directory.
    """
    created: list[str] = []
    current = ""
    for part in split_path(path):
        current = f"{current}/{part}"
        try:
            info = fs.stat(current)
        except FileNotFoundError:
            fs.mkdir(current)
            created.append(current)
            continue
        if not info.is_directory():
            raise NotADirectory(current)

    if created:
        logger.debug("Created %d directories for %s", len(created), path)
    return created
