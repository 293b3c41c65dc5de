import logging
from typing import TYPE_CHECKING

from typing_extensions import override

from termacraft_mcp.models.results import EmptyResult, LsResult, Result
from termacraft_mcp.vfs import NotFoundError
from termacraft_mcp.vfs.path_resolver import ROOT, resolve

from .base import Command, CommandError

if TYPE_CHECKING:
    from termacraft_mcp.models.session import Session

logger = logging.getLogger(__name__)


class LsCommand(Command):
    """Lists the entries of a directory in the order they were created."""

    @override
    def get_name(self) -> str:
        return "ls"

    @override
    def get_usage(self) -> str:
        return "ls [dir]"

    @override
    def get_description(self) -> str:
        return "list files and directories"

    @override
    def execute(self, args: list[str], session: "Session") -> Result:
        raw_path = args[0] if args else session.cwd
        target = resolve(raw_path, session.cwd)
        try:
            entries = session.filesystem.list(target)
        except NotFoundError:
            raise CommandError(
                "not_found", f"ls: cannot access '{raw_path}': No such file or directory"
            ) from None
        return LsResult(entries=[name for name, _ in entries])


class CdCommand(Command):
    """Changes the working directory after checking that the target is a directory."""

    @override
    def get_name(self) -> str:
        return "cd"

    @override
    def get_usage(self) -> str:
        return "cd <dir>"

    @override
    def get_description(self) -> str:
        return "change directory"

    @override
    def execute(self, args: list[str], session: "Session") -> Result:
        raw_path = args[0] if args else ROOT
        target = resolve(raw_path, session.cwd)
        try:
            session.filesystem.list(target)
        except NotFoundError:
            raise CommandError("not_found", f"cd: {raw_path}: No such file or directory") from None

        logger.debug(f"cwd {session.cwd} -> {target}")
        session.cwd = target
        return EmptyResult()
