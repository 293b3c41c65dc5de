"""Built-in terminal commands."""

from .base import Command, CommandError
from .builtins import ClearCommand, HelpCommand, render_help
from .files import CatCommand, MkdirCommand
from .navigation import CdCommand, LsCommand


def get_builtin_commands() -> list[Command]:
    """Returns one instance of every built-in command, in help order."""
    help_command = HelpCommand()
    commands: list[Command] = [
        LsCommand(),
        CatCommand(),
        MkdirCommand(),
        CdCommand(),
        ClearCommand(),
        help_command,
    ]
    help_command.commands = commands
    return commands


HELP_TEXT = render_help(get_builtin_commands())

__all__ = [
    "CatCommand",
    "CdCommand",
    "ClearCommand",
    "Command",
    "CommandError",
    "HELP_TEXT",
    "HelpCommand",
    "LsCommand",
    "MkdirCommand",
    "get_builtin_commands",
    "render_help",
]
