"""
Command dispatch for the virtual terminal.

The engine keeps no state of its own. Everything a command reads or changes
lives in the Session passed to `dispatch`.
"""

import logging
from collections.abc import Iterable
from functools import lru_cache
from typing import TYPE_CHECKING, NamedTuple

from termacraft_mcp.commands import Command, CommandError, get_builtin_commands
from termacraft_mcp.models.results import ErrorResult, Result

if TYPE_CHECKING:
    from termacraft_mcp.models.session import Session

logger = logging.getLogger(__name__)


class ParsedCommand(NamedTuple):
    name: str
    args: list[str]


class CommandEngine:
    """Parses input lines and routes them to the registered commands."""

    def __init__(self, commands: Iterable[Command] | None = None) -> None:
        if commands is None:
            commands = get_builtin_commands()
        self._commands: dict[str, Command] = {command.get_name(): command for command in commands}

    @property
    def commands(self) -> dict[str, Command]:
        return dict(self._commands)

    def get_command(self, name: str) -> Command | None:
        return self._commands.get(name)

    def parse(self, line: str) -> ParsedCommand | None:
        """Splits a line on runs of whitespace. Returns None for a blank line."""
        tokens = line.split()
        if not tokens:
            return None
        return ParsedCommand(name=tokens[0], args=tokens[1:])

    def dispatch(self, name: str, args: list[str], session: "Session") -> Result:
        """
        Runs the named command against the session.

        Args:
            name: The command name.
            args: The remaining tokens of the input line.
            session: The session the command reads and updates.

        Returns:
            The command's Result. Failures are returned as an ErrorResult, never raised.
        """
        command = self._commands.get(name)
        if command is None:
            logger.debug(f"Unknown command: {name}")
            return ErrorResult(
                source=name,
                code="command_not_found",
                message=f"Command not found: {name}. Type 'help' for available commands.",
            )

        try:
            return command.execute(args, session)
        except CommandError as e:
            logger.debug(f"{name} failed: {e.message}")
            return e.to_result(name)

    def is_recorded(self, name: str) -> bool:
        """Whether running `name` leaves a record in the session history."""
        command = self._commands.get(name)
        return command is None or command.records_history


@lru_cache
def get_default_engine() -> CommandEngine:
    """Returns the shared engine with the built-in commands. Commands hold no state."""
    return CommandEngine()
