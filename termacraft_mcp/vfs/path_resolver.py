"""
Path resolution for the virtual terminal.

Only a path that is exactly ``..`` or ``.`` gets special treatment. Segments
of that form embedded in a longer path (``a/../b``) are passed through
untouched, which matches the behaviour of the terminal this package
reproduces. Such paths simply fail to resolve in the filesystem.
"""

ROOT = "/"
SEPARATOR = "/"


def split_segments(path: str) -> list[str]:
    """Split a path into its non-empty segments."""
    return [segment for segment in path.split(SEPARATOR) if segment]


def join_segments(segments: list[str]) -> str:
    return ROOT + SEPARATOR.join(segments)


def resolve(raw_path: str, cwd: str) -> str:
    """
    Resolves a user-provided path against the current working directory.

    Args:
        raw_path: The path string typed by the user.
        cwd: The absolute working directory of the session.

    Returns:
        An absolute path string.
    """
    if not raw_path or raw_path == ".":
        return cwd

    if raw_path == "..":
        segments = split_segments(cwd)
        return join_segments(segments[:-1])

    if raw_path.startswith(SEPARATOR):
        return raw_path

    if cwd == ROOT:
        return ROOT + raw_path
    return cwd + SEPARATOR + raw_path


def parent_of(path: str) -> str:
    return join_segments(split_segments(path)[:-1])


def basename(path: str) -> str:
    segments = split_segments(path)
    return segments[-1] if segments else ""
