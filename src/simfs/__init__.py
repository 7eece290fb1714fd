"""Simulated in-memory filesystem for testing code that performs file I/O."""

__version__ = "0.1.0"

# Export the filesystem implementations and protocol for dependency injection
from simfs.callbacks import CallbackFileSystem
from simfs.errors import (
    AlreadyExists,
    InvalidArgument,
    IsADirectory,
    NotADirectory,
    NotAbsolute,
    NotFound,
    SimFSError,
    SymlinkLoop,
)
from simfs.filesystem import RealFileSystem
from simfs.memory import SimulatedFileSystem
from simfs.protocols import FileSystem

__all__ = [
    "__version__",
    "AlreadyExists",
    "CallbackFileSystem",
    "FileSystem",
    "InvalidArgument",
    "IsADirectory",
    "NotADirectory",
    "NotAbsolute",
    "NotFound",
    "RealFileSystem",
    "SimFSError",
    "SimulatedFileSystem",
    "SymlinkLoop",
]
