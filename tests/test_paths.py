"""Tests for path parsing and resolution."""

from __future__ import annotations

import pytest

from simfs.errors import (
    AlreadyExists,
    IsADirectory,
    NotADirectory,
    NotAbsolute,
    NotFound,
    SymlinkLoop,
)
from simfs.paths import resolve, split_path, write_node
from simfs.tree import Directory, File, SymLink, from_mapping


class TestSplitPath:
    """Tests for split_path."""

    def test_posix_path(self) -> None:
        """Test splitting a forward-slash path."""
        assert split_path("/tmp/a/b") == ["tmp", "a", "b"]

    def test_root(self) -> None:
        """Test the root path has no components."""
        assert split_path("/") == []

    def test_backslash_separators(self) -> None:
        """Test backslashes separate components too."""
        assert split_path("\\tmp\\a/b") == ["tmp", "a", "b"]

    def test_drive_prefix_stripped(self) -> None:
        """Test a drive letter prefix is ignored."""
        assert split_path("C:\\tmp\\a") == ["tmp", "a"]
        assert split_path("d:/tmp") == ["tmp"]

    def test_empty_components_dropped(self) -> None:
        """Test doubled and trailing separators are tolerated."""
        assert split_path("//tmp///a/") == ["tmp", "a"]

    @pytest.mark.parametrize("path", ["tmp/a", "", "C:tmp", "./tmp"])
    def test_relative_path_raises(self, path: str) -> None:
        """Test relative paths are rejected."""
        with pytest.raises(NotAbsolute):
            split_path(path)

    def test_not_absolute_is_value_error(self) -> None:
        """Test NotAbsolute can be caught as ValueError."""
        with pytest.raises(ValueError, match="absolute"):
            split_path("relative")


class TestResolve:
    """Tests for resolve."""

    @pytest.fixture
    def root(self) -> Directory:
        return from_mapping(
            {
                "a": {"b": {"c.txt": "c"}},
                "link": {"SYMLINK": "/a"},
                "chain": {"SYMLINK": "/link"},
                "file": "payload",
                "file_link": {"SYMLINK": "/file"},
            }
        )

    def test_resolve_root(self, root: Directory) -> None:
        """Test the root path resolves to the root."""
        assert resolve(root, "/") is root

    def test_resolve_file(self, root: Directory) -> None:
        """Test resolving a nested file."""
        node = resolve(root, "/a/b/c.txt")
        assert isinstance(node, File)
        assert node.data == "c"

    def test_missing_component_raises(self, root: Directory) -> None:
        """Test a missing component raises NotFound."""
        with pytest.raises(NotFound):
            resolve(root, "/a/missing/c.txt")

    def test_not_found_is_file_not_found_error(self, root: Directory) -> None:
        """Test NotFound can be caught as FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            resolve(root, "/nope")

    def test_intermediate_link_followed(self, root: Directory) -> None:
        """Test links are followed when descending through them."""
        node = resolve(root, "/link/b/c.txt")
        assert isinstance(node, File)

    def test_link_chain_followed(self, root: Directory) -> None:
        """Test chains of links are followed."""
        node = resolve(root, "/chain/b")
        assert isinstance(node, Directory)
        assert "c.txt" in node.children

    def test_final_link_not_followed_by_default(self, root: Directory) -> None:
        """Test the last component is returned as a link."""
        node = resolve(root, "/link")
        assert isinstance(node, SymLink)
        assert node.target == "/a"

    def test_final_link_followed_when_requested(self, root: Directory) -> None:
        """Test follow_last resolves through the final link chain."""
        node = resolve(root, "/chain", follow_last=True)
        assert isinstance(node, Directory)
        assert "b" in node.children

    def test_descending_through_file_raises(self, root: Directory) -> None:
        """Test a file used as a directory raises NotADirectory."""
        with pytest.raises(NotADirectory):
            resolve(root, "/file/child")
        with pytest.raises(NotADirectory):
            resolve(root, "/file_link/child")

    def test_dangling_link_raises(self) -> None:
        """Test a link to a missing target raises NotFound when followed."""
        root = from_mapping({"broken": {"SYMLINK": "/gone"}})
        assert isinstance(resolve(root, "/broken"), SymLink)
        with pytest.raises(NotFound):
            resolve(root, "/broken", follow_last=True)

    def test_link_loop_raises(self) -> None:
        """Test cyclic links raise SymlinkLoop."""
        root = from_mapping({"a": {"SYMLINK": "/b"}, "b": {"SYMLINK": "/a"}})
        with pytest.raises(SymlinkLoop):
            resolve(root, "/a/x")
        with pytest.raises(SymlinkLoop):
            resolve(root, "/a", follow_last=True, max_depth=5)


class TestWriteNode:
    """Tests for write_node."""

    @pytest.fixture
    def root(self) -> Directory:
        return from_mapping(
            {
                "tmp": {"existing": {}, "file.txt": "old"},
                "link": {"SYMLINK": "/tmp"},
            }
        )

    def test_write_file(self, root: Directory) -> None:
        """Test writing a new file."""
        write_node(root, "/tmp/new.txt", "data")
        assert root.children["tmp"].children["new.txt"].data == "data"

    def test_replace_file(self, root: Directory) -> None:
        """Test writing replaces an existing payload."""
        write_node(root, "/tmp/file.txt", b"new")
        assert root.children["tmp"].children["file.txt"].data == b"new"

    def test_write_through_intermediate_link(self, root: Directory) -> None:
        """Test ancestors are resolved through links."""
        write_node(root, "/link/existing/a.txt", "a")
        existing = root.children["tmp"].children["existing"]
        assert existing.children["a.txt"].data == "a"

    def test_write_into_link_parent_raises(self, root: Directory) -> None:
        """Test a link as the immediate parent is not a plain directory."""
        with pytest.raises(NotADirectory):
            write_node(root, "/link/new.txt", "x")

    def test_write_into_file_parent_raises(self, root: Directory) -> None:
        """Test a file as the parent raises NotADirectory."""
        with pytest.raises(NotADirectory):
            write_node(root, "/tmp/file.txt/child", "x")

    def test_write_missing_ancestor_raises(self, root: Directory) -> None:
        """Test writing requires ancestors to exist."""
        with pytest.raises(NotFound):
            write_node(root, "/missing/dir/file.txt", "x")

    def test_write_over_directory_raises(self, root: Directory) -> None:
        """Test writing a file over a directory raises IsADirectory."""
        with pytest.raises(IsADirectory):
            write_node(root, "/tmp/existing", "x")

    def test_mkdir(self, root: Directory) -> None:
        """Test creating a directory inserts an empty directory."""
        node = write_node(root, "/tmp/created", mkdir=True)
        assert isinstance(node, Directory)
        assert root.children["tmp"].children["created"] is node
        assert node.children == {}

    def test_mkdir_existing_raises(self, root: Directory) -> None:
        """Test creating an existing name raises AlreadyExists."""
        with pytest.raises(AlreadyExists):
            write_node(root, "/tmp/existing", mkdir=True)
        with pytest.raises(AlreadyExists):
            write_node(root, "/tmp/file.txt", mkdir=True)

    def test_mkdir_follows_link_parent(self, root: Directory) -> None:
        """Test directory creation follows a link in the parent position."""
        write_node(root, "/link/made", mkdir=True)
        assert isinstance(root.children["tmp"].children["made"], Directory)
        assert isinstance(root.children["link"], SymLink)

    def test_mkdir_existing_through_link_parent_raises(self, root: Directory) -> None:
        with pytest.raises(AlreadyExists):
            write_node(root, "/link/existing", mkdir=True)

    def test_root_path(self, root: Directory) -> None:
        """Test the root itself cannot be created or written."""
        with pytest.raises(AlreadyExists):
            write_node(root, "/", mkdir=True)
        with pytest.raises(IsADirectory):
            write_node(root, "/", "x")

    def test_relative_path_raises(self, root: Directory) -> None:
        """Test relative paths are rejected."""
        with pytest.raises(NotAbsolute):
            write_node(root, "tmp/x", "x")
