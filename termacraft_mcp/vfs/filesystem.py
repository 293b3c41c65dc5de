"""Immutable virtual filesystem with structural sharing between versions."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .errors import AlreadyExistsError, NotFoundError
from .nodes import Directory, File, Node, NodeKind
from .path_resolver import basename, parent_of, split_segments

DOT_NAMES = (".", "..")

logger = logging.getLogger(__name__)


class VirtualFileSystem:
    """
    A persistent tree of directories and files.

    Instances never change after construction. Mutating operations return a
    new VirtualFileSystem whose root differs from this one only along the
    path to the changed node; every other subtree is the same object.
    """

    __slots__ = ("_root",)

    def __init__(self, root: Directory | None = None) -> None:
        self._root = root if root is not None else Directory()

    @property
    def root(self) -> Directory:
        return self._root

    @classmethod
    def from_seed(cls, seed: Mapping[str, Mapping[str, Any]]) -> "VirtualFileSystem":
        """
        Builds a filesystem from an ordered mapping of absolute paths.

        A value carrying a ``content`` key declares a file; any other value
        declares a directory. Parents must be declared before their children.

        Args:
            seed: Mapping of absolute path to node declaration.

        Returns:
            The populated VirtualFileSystem.

        Raises:
            NotFoundError: If a declared path has no parent directory yet.
            AlreadyExistsError: If a path is declared twice.
        """
        fs = cls()
        for path, declaration in seed.items():
            if "content" in declaration:
                node: Node = File(content=str(declaration["content"]))
            else:
                node = Directory()
            fs = fs._insert(path, node)
        logger.debug(f"Built seeded filesystem with {len(seed)} entries")
        return fs

    def _lookup(self, path: str) -> Node | None:
        node: Node = self._root
        for segment in split_segments(path):
            if not isinstance(node, Directory):
                return None
            child = node.get(segment)
            if child is None:
                return None
            node = child
        return node

    def exists(self, path: str) -> bool:
        return self._lookup(path) is not None

    def read(self, path: str) -> str:
        """Return the content of the file at `path`."""
        node = self._lookup(path)
        if not isinstance(node, File):
            raise NotFoundError(path, f"{path}: No such file")
        return node.content

    def list(self, path: str) -> list[tuple[str, NodeKind]]:
        """Return the `(name, kind)` entries of the directory at `path` in insertion order."""
        node = self._lookup(path)
        if not isinstance(node, Directory):
            raise NotFoundError(path, f"{path}: No such directory")
        return list(node.entries())

    def mkdir(self, path: str) -> "VirtualFileSystem":
        """
        Creates an empty directory at `path`.

        The parent directory must already exist; intermediate directories
        are never created.

        Returns:
            A new VirtualFileSystem containing the directory.

        Raises:
            AlreadyExistsError: If any node already exists at `path`.
            NotFoundError: If the parent of `path` is not an existing directory.
        """
        new_fs = self._insert(path, Directory())
        logger.debug(f"Created directory {path}")
        return new_fs

    def _insert(self, path: str, node: Node) -> "VirtualFileSystem":
        # "." and ".." always name an existing directory.
        if basename(path) in DOT_NAMES or self.exists(path):
            raise AlreadyExistsError(path, f"{path}: File exists")

        parent_path = parent_of(path)
        if not isinstance(self._lookup(parent_path), Directory):
            raise NotFoundError(parent_path, f"{parent_path}: No such directory")

        return VirtualFileSystem(self._rebuild(self._root, split_segments(parent_path), basename(path), node))

    def _rebuild(self, directory: Directory, segments: Sequence[str], name: str, node: Node) -> Directory:
        # Path copying: only the directories on the way down are replaced.
        if not segments:
            return directory.with_child(name, node)
        head, rest = segments[0], segments[1:]
        child = directory.get(head)
        if not isinstance(child, Directory):
            raise NotFoundError(head, f"{head}: No such directory")
        return directory.with_child(head, self._rebuild(child, rest, name, node))

    def __repr__(self) -> str:
        return f"VirtualFileSystem(entries={[name for name, _ in self._root.entries()]!r})"
