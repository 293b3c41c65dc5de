from typing import TYPE_CHECKING

from typing_extensions import override

from termacraft_mcp.models.results import CatResult, EmptyResult, Result
from termacraft_mcp.vfs import AlreadyExistsError, NotFoundError
from termacraft_mcp.vfs.path_resolver import resolve

from .base import Command, CommandError

if TYPE_CHECKING:
    from termacraft_mcp.models.session import Session


class CatCommand(Command):
    """Prints the content of a file verbatim."""

    @override
    def get_name(self) -> str:
        return "cat"

    @override
    def get_usage(self) -> str:
        return "cat <file>"

    @override
    def get_description(self) -> str:
        return "display file contents"

    @override
    def execute(self, args: list[str], session: "Session") -> Result:
        file_name = self.join_operand(args, "cat: missing file operand")
        try:
            content = session.filesystem.read(resolve(file_name, session.cwd))
        except NotFoundError:
            raise CommandError("not_found", f"cat: {file_name}: No such file or directory") from None
        return CatResult(content=content)


class MkdirCommand(Command):
    """Creates a single directory whose parent already exists."""

    @override
    def get_name(self) -> str:
        return "mkdir"

    @override
    def get_usage(self) -> str:
        return "mkdir <dir>"

    @override
    def get_description(self) -> str:
        return "create a new directory"

    @override
    def execute(self, args: list[str], session: "Session") -> Result:
        dir_name = self.join_operand(args, "mkdir: missing operand")
        try:
            new_fs = session.filesystem.mkdir(resolve(dir_name, session.cwd))
        except AlreadyExistsError:
            raise CommandError(
                "already_exists", f"mkdir: cannot create directory '{dir_name}': File exists"
            ) from None
        except NotFoundError:
            raise CommandError(
                "not_found", f"mkdir: cannot create directory '{dir_name}': No such file or directory"
            ) from None

        session.filesystem = new_fs
        return EmptyResult()
