"""In-memory filesystem implementation.

``SimulatedFileSystem`` serves every call from a tree of nodes held in
memory. Construct one per test, populate it with ``set_mock_filesystem``,
hand it to the code under test, and inspect the result with
``get_mock_filesystem``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from simfs.config import SimFSConfig
from simfs.errors import IsADirectory, NotADirectory, NotFound
from simfs.handles import FileHandle
from simfs.paths import resolve, write_node
from simfs.tree import Directory, File, Node, SymLink, from_mapping, to_mapping
from simfs.types import KIND_DIRECTORY, KIND_FILE, KIND_SYMLINK, Stat

logger = logging.getLogger(__name__)


class SimulatedFileSystem:
    """Filesystem backed by an in-memory tree.

    Satisfies the FileSystem protocol structurally.
    """

    def __init__(
        self,
        tree: Mapping[str, Any] | None = None,
        config: SimFSConfig | None = None,
    ) -> None:
        """Initialize an empty (or pre-populated) filesystem.

        Args:
            tree: Optional initial tree in nested-mapping form.
            config: Settings. Defaults to ``SimFSConfig()``.
        """
        self.config = config or SimFSConfig()
        self.root = Directory()
        if tree is not None:
            self.set_mock_filesystem(tree)

    # ------------------------------------------------------------------
    # Test hooks
    # ------------------------------------------------------------------

    def set_mock_filesystem(self, tree: Mapping[str, Any]) -> None:
        """Replace the whole tree.

        Args:
            tree: Nested mapping; see ``simfs.tree.from_mapping``.
        """
        self.root = from_mapping(tree, self.config.symlink_key)
        logger.debug("Installed tree with %d top-level entries", len(self.root.children))

    def get_mock_filesystem(self) -> dict[str, Any]:
        """Get a snapshot of the whole tree in nested-mapping form."""
        return to_mapping(self.root, self.config.symlink_key)

    # ------------------------------------------------------------------
    # Filesystem operations
    # ------------------------------------------------------------------

    def _resolve(self, path: str, follow_last: bool = False) -> Node:
        return resolve(
            self.root, path, follow_last=follow_last, max_depth=self.config.max_symlink_depth
        )

    def realpath(self, path: str) -> str:
        node = self._resolve(path)
        if isinstance(node, SymLink):
            return node.target
        return path

    def listdir(self, path: str) -> list[str]:
        node = self._resolve(path, follow_last=True)
        if not isinstance(node, Directory):
            raise NotADirectory(path)
        return list(node.children)

    def read_file(self, path: str, encoding: str | None = None) -> str | bytes:
        node = self._resolve(path, follow_last=True)
        if not isinstance(node, File):
            raise IsADirectory(path)
        if encoding is None:
            return node.data
        if isinstance(node.data, bytes):
            return node.data.decode(encoding)
        return node.data

    def write_file(self, path: str, data: str | bytes) -> None:
        write_node(self.root, path, data, max_depth=self.config.max_symlink_depth)

    def mkdir(self, path: str) -> None:
        write_node(self.root, path, mkdir=True, max_depth=self.config.max_symlink_depth)

    def stat(self, path: str) -> Stat:
        return self._stat_node(self._resolve(path, follow_last=True))

    def lstat(self, path: str) -> Stat:
        return self._stat_node(self._resolve(path))

    def exists(self, path: str) -> bool:
        try:
            self._resolve(path, follow_last=True)
        except (NotFound, NotADirectory):
            return False
        return True

    def is_dir(self, path: str) -> bool:
        try:
            return self.stat(path).is_directory()
        except (NotFound, NotADirectory):
            return False

    def open(self, path: str) -> FileHandle:
        """Open a file for cursor-based reads.

        Args:
            path: File path. A trailing symbolic link is followed.

        Returns:
            Handle wrapping the payload as bytes with the cursor at 0.

        Raises:
            NotFound: If nothing exists at the path.
            IsADirectory: If the path is a directory.
        """
        try:
            node = self._resolve(path, follow_last=True)
        except (NotFound, NotADirectory) as e:
            raise NotFound(path) from e
        if not isinstance(node, File):
            raise IsADirectory(path)
        return FileHandle(path=path, buffer=node.to_bytes(self.config.encoding))

    def _stat_node(self, node: Node) -> Stat:
        if isinstance(node, Directory):
            return Stat(kind=KIND_DIRECTORY, mtime=node.mtime)
        if isinstance(node, SymLink):
            return Stat(kind=KIND_SYMLINK, mtime=node.mtime, size=len(node.target))
        return Stat(
            kind=KIND_FILE,
            mtime=node.mtime,
            size=len(node.to_bytes(self.config.encoding)),
        )
