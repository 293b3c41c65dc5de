"""Base class and error type shared by all terminal commands."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from termacraft_mcp.models.results import ErrorCode, ErrorResult, Result

if TYPE_CHECKING:
    from termacraft_mcp.models.session import Session


class CommandError(Exception):
    """Raised by a command handler; converted into an error Result by the engine."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code: ErrorCode = code
        self.message: str = message

    def to_result(self, source: str) -> ErrorResult:
        return ErrorResult(source=source, code=self.code, message=self.message)


class Command(ABC):
    """
    A single terminal command.

    Handlers read and replace the session's state but must only assign to it
    once they have fully succeeded, so a failed command leaves the session
    exactly as it found it.
    """

    # Whether running this command leaves a record in the session history.
    records_history: bool = True

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def get_usage(self) -> str:
        pass

    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def execute(self, args: list[str], session: "Session") -> Result:
        pass

    def join_operand(self, args: list[str], missing_message: str) -> str:
        """Rejoins all arguments with single spaces so names may contain spaces."""
        operand = " ".join(args)
        if not operand:
            raise CommandError("missing_operand", missing_message)
        return operand
