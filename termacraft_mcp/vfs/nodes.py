"""Node types of the virtual filesystem tree.

Nodes are frozen and their child mappings are read-only views, so a node can
be shared between any number of filesystem versions.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class NodeKind(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class File:
    content: str = ""

    @property
    def kind(self) -> NodeKind:
        return NodeKind.FILE


@dataclass(frozen=True)
class Directory:
    children: Mapping[str, "Node"] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if not isinstance(self.children, MappingProxyType):
            object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    @property
    def kind(self) -> NodeKind:
        return NodeKind.DIRECTORY

    def get(self, name: str) -> "Node | None":
        return self.children.get(name)

    def with_child(self, name: str, node: "Node") -> "Directory":
        """Return a copy of this directory with `name` bound to `node`.

        Existing entries keep their position; a new name is appended last.
        The other children are carried over as the same objects.
        """
        children = dict(self.children)
        children[name] = node
        return Directory(MappingProxyType(children))

    def entries(self) -> Iterable[tuple[str, NodeKind]]:
        for name, node in self.children.items():
            yield name, node.kind


Node = Directory | File
