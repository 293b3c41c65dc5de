import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from termacraft_mcp.engine import CommandEngine, get_default_engine
from termacraft_mcp.models.results import Result
from termacraft_mcp.vfs import VirtualFileSystem
from termacraft_mcp.vfs.path_resolver import ROOT
from termacraft_mcp.vfs.seed import create_default_filesystem

logger = logging.getLogger(__name__)


class HistoryRecord(BaseModel):
    """One executed command line and its outcome."""

    command: str
    prompt: str
    result: Result


class Session(BaseModel):
    """Stores the filesystem snapshot, working directory and history of one terminal."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    filesystem: VirtualFileSystem = Field(default_factory=create_default_filesystem)
    cwd: str = ROOT
    history: list[HistoryRecord] = Field(default_factory=list)

    @property
    def prompt(self) -> str:
        return f"{self.cwd} $"

    def execute(self, line: str, engine: CommandEngine | None = None) -> Result | None:
        """
        Runs one input line against this session.

        Blank lines are ignored. ``clear`` empties the history and leaves no
        record of itself; every other command appends exactly one record.

        Args:
            line: The raw text typed by the user.
            engine: The engine to dispatch with. The shared default engine is used if omitted.

        Returns:
            The Result of the command, or None for a blank line.
        """
        if engine is None:
            engine = get_default_engine()

        parsed = engine.parse(line)
        if parsed is None:
            return None

        prompt = self.prompt
        result = engine.dispatch(parsed.name, parsed.args, self)
        if engine.is_recorded(parsed.name):
            self.history.append(HistoryRecord(command=line, prompt=prompt, result=result))
        logger.debug(f"Executed '{line}' -> {result.kind}")
        return result

    def clear_history(self) -> None:
        self.history.clear()

    def transcript(self) -> list[dict[str, Any]]:
        """Returns the history as plain dictionaries for renderers."""
        return [record.model_dump() for record in self.history]
