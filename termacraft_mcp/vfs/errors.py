"""Exceptions raised by the virtual filesystem."""


class FileSystemError(Exception):
    """Base class for virtual filesystem faults."""

    code: str = "filesystem_error"

    def __init__(self, path: str, message: str | None = None):
        self.path = path
        self.message = message or f"{path}: {self.code}"
        super().__init__(self.message)


class NotFoundError(FileSystemError):
    """The path does not resolve to a node of the expected kind."""

    code = "not_found"


class AlreadyExistsError(FileSystemError):
    """A node already exists at the target path."""

    code = "already_exists"
