"""Path parsing and resolution against an in-memory tree.

Paths must be absolute. Both ``/`` and ``\\`` separate components and an
optional drive prefix (``C:``) is ignored, so Windows-style absolute paths
resolve against the same tree.
"""

from __future__ import annotations

import logging
import re

from simfs.errors import (
    AlreadyExists,
    IsADirectory,
    NotADirectory,
    NotAbsolute,
    NotFound,
    SymlinkLoop,
)
from simfs.tree import Directory, File, Node, SymLink

logger = logging.getLogger(__name__)

# Matches Linux's MAXSYMLINKS
DEFAULT_MAX_SYMLINK_DEPTH = 40

_DRIVE_PREFIX = re.compile(r"^[a-zA-Z]:(?=[/\\])")
_SEPARATORS = re.compile(r"[/\\]")


def split_path(path: str) -> list[str]:
    """Split an absolute path into its components.

    Args:
        path: Absolute path, optionally prefixed with a drive letter.

    Returns:
        Non-empty components from the root down. The root itself is ``[]``.

    Raises:
        NotAbsolute: If the path does not start with a separator.

    Example:
        >>> split_path("C:\\\\tmp\\\\a/b/")
        ['tmp', 'a', 'b']
    """
    stripped = _DRIVE_PREFIX.sub("", path, count=1)
    if not stripped or stripped[0] not in "/\\":
        raise NotAbsolute(path)
    return [part for part in _SEPARATORS.split(stripped) if part]


def _follow(
    root: Directory, link: SymLink, max_depth: int, depth: int
) -> Node:
    """Resolve a link to the node it points at, following chains."""
    if depth >= max_depth:
        raise SymlinkLoop(link.target)
    node = _walk(root, split_path(link.target), link.target, max_depth, depth + 1)
    if isinstance(node, SymLink):
        return _follow(root, node, max_depth, depth + 1)
    return node


def _walk(
    root: Directory, parts: list[str], path: str, max_depth: int, depth: int
) -> Node:
    node: Node = root
    for part in parts:
        if isinstance(node, SymLink):
            node = _follow(root, node, max_depth, depth)
        if isinstance(node, File):
            raise NotADirectory(path)
        try:
            node = node.children[part]
        except KeyError:
            raise NotFound(path) from None
    return node


def resolve(
    root: Directory,
    path: str,
    follow_last: bool = False,
    max_depth: int = DEFAULT_MAX_SYMLINK_DEPTH,
) -> Node:
    """Resolve a path to a node.

    Symbolic links met on the way down are followed transparently. The
    final node is returned as is unless ``follow_last`` is set.

    Args:
        root: Root directory of the tree.
        path: Absolute path to resolve.
        follow_last: Follow the final node if it is a symbolic link.
        max_depth: Maximum number of links followed in a chain.

    Returns:
        The resolved node.

    Raises:
        NotAbsolute: If the path is relative.
        NotFound: If any component is missing.
        NotADirectory: If a file is used as an intermediate component.
        SymlinkLoop: If link chains are deeper than ``max_depth``.
    """
    try:
        node = _walk(root, split_path(path), path, max_depth, 0)
        if follow_last and isinstance(node, SymLink):
            node = _follow(root, node, max_depth, 0)
    except (NotFound, NotADirectory) as e:
        logger.debug("Failed to resolve %s: %s", path, e)
        raise
    return node


def write_node(
    root: Directory,
    path: str,
    data: str | bytes | None = None,
    mkdir: bool = False,
    max_depth: int = DEFAULT_MAX_SYMLINK_DEPTH,
) -> Node:
    """Create a directory or write a file payload at a path.

    Ancestors are resolved as in ``resolve``. When writing a file the
    immediate parent must be a plain directory; a symbolic link in that
    position is only followed when creating a directory.

    Args:
        root: Root directory of the tree.
        path: Absolute path of the node to create or replace.
        data: File payload (ignored when ``mkdir`` is set).
        mkdir: Create an empty directory instead of writing a file.
        max_depth: Maximum number of links followed in a chain.

    Returns:
        The created or updated node.

    Raises:
        NotFound: If an ancestor is missing.
        NotADirectory: If the parent is not a directory (for a file write,
            not a plain directory).
        AlreadyExists: If ``mkdir`` is set and the name already exists.
        IsADirectory: If writing a file over a directory.
    """
    parts = split_path(path)
    if not parts:
        if mkdir:
            raise AlreadyExists(path)
        raise IsADirectory(path)

    *ancestors, name = parts
    parent = _walk(root, ancestors, path, max_depth, 0)
    if mkdir and isinstance(parent, SymLink):
        parent = _follow(root, parent, max_depth, 0)
    if not isinstance(parent, Directory):
        raise NotADirectory(path)

    existing = parent.children.get(name)
    if mkdir:
        if existing is not None:
            raise AlreadyExists(path)
        node: Node = Directory()
        logger.debug("Created directory %s", path)
    else:
        if isinstance(existing, Directory):
            raise IsADirectory(path)
        node = File(b"" if data is None else data)
        logger.debug("Wrote %d bytes to %s", len(node.data), path)

    parent.children[name] = node
    return node
