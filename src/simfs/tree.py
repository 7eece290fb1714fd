"""Node types for the in-memory tree.

A tree is a single root ``Directory``. Test code usually describes trees as
nested mappings (directories are mappings, files are strings or bytes, and a
symbolic link is a one-key mapping under the reserved ``SYMLINK`` key); the
``from_mapping`` and ``to_mapping`` helpers convert between the two forms.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "SYMLINK_KEY",
    "Directory",
    "File",
    "Node",
    "SymLink",
    "from_mapping",
    "to_mapping",
]

# Reserved key marking a symbolic link in the mapping form
SYMLINK_KEY = "SYMLINK"


@dataclass
class Directory:
    """Directory node: child name to node, in insertion order."""

    children: dict[str, Node] = field(default_factory=dict)
    mtime: float = field(default_factory=time.time, compare=False)


@dataclass
class File:
    """File node holding an opaque payload."""

    data: str | bytes = b""
    mtime: float = field(default_factory=time.time, compare=False)

    def to_bytes(self, encoding: str = "utf-8") -> bytes:
        """Get the payload as bytes, encoding text payloads."""
        if isinstance(self.data, bytes):
            return self.data
        return self.data.encode(encoding)


@dataclass
class SymLink:
    """Symbolic link node pointing at an absolute path."""

    target: str
    mtime: float = field(default_factory=time.time, compare=False)


Node = Directory | File | SymLink


def _is_symlink_record(value: Mapping[str, Any], symlink_key: str) -> bool:
    return len(value) == 1 and symlink_key in value and isinstance(value[symlink_key], str)


def from_mapping(
    value: Mapping[str, Any], symlink_key: str = SYMLINK_KEY, _path: str = ""
) -> Directory:
    """Build a directory node from the nested-mapping form.

    Args:
        value: Mapping of name to child. Mappings are directories, ``str`` or
            ``bytes`` values are files, and ``{symlink_key: "/target"}`` is a
            symbolic link.
        symlink_key: Reserved key marking symbolic links.

    Returns:
        The directory node.

    Raises:
        TypeError: If a value is not a mapping, str or bytes.
    """
    directory = Directory()
    for name, child in value.items():
        child_path = f"{_path}/{name}"
        if isinstance(child, (str, bytes)):
            directory.children[name] = File(child)
        elif isinstance(child, Mapping):
            if _is_symlink_record(child, symlink_key):
                directory.children[name] = SymLink(child[symlink_key])
            else:
                directory.children[name] = from_mapping(child, symlink_key, child_path)
        else:
            raise TypeError(
                f"Unsupported node at {child_path}: {type(child).__name__}"
            )
    return directory


def to_mapping(node: Node, symlink_key: str = SYMLINK_KEY) -> Any:
    """Convert a node back to the nested-mapping form.

    Directories become fresh dicts, so mutating the result never touches
    the tree.
    """
    if isinstance(node, Directory):
        return {
            name: to_mapping(child, symlink_key)
            for name, child in node.children.items()
        }
    if isinstance(node, SymLink):
        return {symlink_key: node.target}
    return node.data
