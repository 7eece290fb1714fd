"""Configuration for simulated filesystems."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

from simfs.paths import DEFAULT_MAX_SYMLINK_DEPTH
from simfs.tree import SYMLINK_KEY


class SimFSConfig(BaseModel):
    """Settings shared by a simulated filesystem and its fixture files."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    symlink_key: str = Field(default=SYMLINK_KEY, alias="symlinkKey", min_length=1)
    max_symlink_depth: int = Field(
        default=DEFAULT_MAX_SYMLINK_DEPTH, alias="maxSymlinkDepth", ge=1
    )
    encoding: str = "utf-8"

    @classmethod
    def from_file(cls, path: Path) -> SimFSConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML file.

        Returns:
            Parsed configuration. An empty file yields the defaults.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ValueError: If the YAML is invalid or fails validation.
        """
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid config file {path}: {e}") from e
        return cls.model_validate(data)
