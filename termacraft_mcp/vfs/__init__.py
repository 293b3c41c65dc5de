"""In-memory, immutable virtual filesystem used by the terminal sessions."""

from .errors import AlreadyExistsError, FileSystemError, NotFoundError
from .filesystem import VirtualFileSystem
from .nodes import Directory, File, Node, NodeKind

__all__ = [
    "AlreadyExistsError",
    "Directory",
    "File",
    "FileSystemError",
    "Node",
    "NodeKind",
    "NotFoundError",
    "VirtualFileSystem",
]
