from collections.abc import Iterable
from typing import TYPE_CHECKING

from typing_extensions import override

from termacraft_mcp.models.results import EmptyResult, Result, TextResult

from .base import Command

if TYPE_CHECKING:
    from termacraft_mcp.models.session import Session


def render_help(commands: Iterable[Command]) -> str:
    """Formats one aligned `usage - description` line per command."""
    lines = [f"  {command.get_usage():<15}- {command.get_description()}" for command in commands]
    return "\n".join(["Available commands:", *lines])


class ClearCommand(Command):
    """Empties the session history. Leaves no record of itself."""

    records_history = False

    @override
    def get_name(self) -> str:
        return "clear"

    @override
    def get_usage(self) -> str:
        return "clear"

    @override
    def get_description(self) -> str:
        return "clear the terminal"

    @override
    def execute(self, args: list[str], session: "Session") -> Result:
        session.clear_history()
        return EmptyResult()


class HelpCommand(Command):
    """Shows a summary of the commands it was registered alongside."""

    def __init__(self, commands: Iterable[Command] | None = None) -> None:
        self.commands: list[Command] = list(commands) if commands is not None else []

    @override
    def get_name(self) -> str:
        return "help"

    @override
    def get_usage(self) -> str:
        return "help"

    @override
    def get_description(self) -> str:
        return "show this help message"

    @override
    def execute(self, args: list[str], session: "Session") -> Result:
        return TextResult(content=render_help(self.commands or [self]))
