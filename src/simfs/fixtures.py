"""Loading and saving trees from fixture files.

Fixture files hold a tree in nested-mapping form as YAML (JSON is valid
YAML, so ``.json`` fixtures load too)::

    tmp:
      existing: {}
      notes.txt: "hello"
      latest: {SYMLINK: /tmp/existing}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from simfs.config import SimFSConfig
from simfs.memory import SimulatedFileSystem


def load_tree(path: Path) -> dict[str, Any]:
    """Load a tree mapping from a YAML or JSON file.

    Args:
        path: Path to the fixture file.

    Returns:
        The tree mapping. An empty file yields an empty tree.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is not valid YAML or its top level is not
            a mapping.
    """
    if not path.exists():
        raise FileNotFoundError(f"Fixture not found: {path}")

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid fixture {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Fixture {path} must contain a mapping at the top level")
    return data


def dump_tree(path: Path, tree: dict[str, Any]) -> None:
    """Write a tree mapping to a fixture file.

    ``.json`` files are written as JSON, everything else as YAML.

    Args:
        path: Destination file.
        tree: Tree in nested-mapping form.
    """
    if path.suffix == ".json":
        path.write_text(json.dumps(tree, indent=2) + "\n")
    else:
        path.write_text(yaml.safe_dump(tree, default_flow_style=False, sort_keys=False))


def filesystem_from_file(
    path: Path, config: SimFSConfig | None = None
) -> SimulatedFileSystem:
    """Create a simulated filesystem populated from a fixture file.

    Args:
        path: Path to the fixture file.
        config: Optional settings for the filesystem.

    Returns:
        Filesystem holding the fixture's tree.

    Raises:
        TypeError: If the fixture holds values that are not valid nodes.
    """
    tree = load_tree(path)
    try:
        return SimulatedFileSystem(tree, config=config)
    except TypeError as e:
        raise TypeError(f"Invalid fixture {path}: {e}") from e
