import logging

from termacraft_mcp.engine import CommandEngine, get_default_engine
from termacraft_mcp.models.session import Session

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages one independent terminal session per caller."""

    def __init__(self, engine: CommandEngine | None = None) -> None:
        self.engine = engine if engine is not None else get_default_engine()
        # Simple dict as an in-process session storage.
        self._storage: dict[str, Session] = {}

    def get_session(self, session_id: str = "default") -> Session:
        """Returns or creates the session for a given id."""
        if session_id not in self._storage:
            logger.info(f"Creating terminal session '{session_id}'")
            self._storage[session_id] = Session()
        return self._storage[session_id]

    def execute(self, line: str, session_id: str = "default"):
        return self.get_session(session_id).execute(line, self.engine)

    def reset_session(self, session_id: str = "default") -> Session:
        """Discards any state for the session and starts it again from the seed tree."""
        logger.info(f"Resetting terminal session '{session_id}'")
        self._storage[session_id] = Session()
        return self._storage[session_id]

    def session_ids(self) -> list[str]:
        return list(self._storage)
