"""
MCP server definition for the TermaCraft terminal.
"""

import logging
from typing import Any, Optional

from fastapi.middleware.cors import CORSMiddleware
from starlette.applications import Starlette
from starlette.middleware import Middleware

from mcp.server.fastmcp import Context, FastMCP

from termacraft_mcp.prompts import get_prompts
from termacraft_mcp.utils.config import ServiceConfig
from termacraft_mcp.utils.dependencies import get_base_config, get_session_manager


logger = logging.getLogger(__name__)


class CustomFastMCP(FastMCP):
    """Custom FastMCP server with CORS middleware."""

    def _add_cors_middleware(self, app: Starlette) -> Starlette:
        """A helper to add CORS middleware to a Starlette app."""
        app.user_middleware.insert(
            0,
            Middleware(
                CORSMiddleware,
                allow_origin_regex=".*",
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            ),
        )
        app.middleware_stack = app.build_middleware_stack()
        return app

    def sse_app(self, mount_path: str | None = None) -> Starlette:
        """Overrides the default sse_app to inject CORS middleware."""
        app = super().sse_app(mount_path)
        return self._add_cors_middleware(app)

    def streamable_http_app(self) -> Starlette:
        """Overrides the default streamable_http_app to inject CORS middleware."""
        app = super().streamable_http_app()
        return self._add_cors_middleware(app)


def build_server(config: ServiceConfig) -> CustomFastMCP:
    """Build and configure the FastMCP server instance.

    Args:
        config: The server's service configuration.

    Returns:
        A configured CustomFastMCP instance.
    """
    logger.info(
        "Initializing FastMCP server",
        extra={"host": config.MCP_HOST, "port": config.MCP_PORT},
    )
    return CustomFastMCP(
        "termacraft-mcp",
        host=config.MCP_HOST,
        port=config.MCP_PORT,
    )

# main.py runs this instance.
server_config = get_base_config()
mcp_app = build_server(server_config)


def _session_id(session_id: Optional[str]) -> str:
    return session_id or server_config.DEFAULT_SESSION_ID


# --- Prompt Handlers ---
@mcp_app.prompt(name="terminal-guide", title="Guide to the TermaCraft terminal")
def get_terminal_guide() -> str:
    """Explains the available commands and how results are shaped."""
    prompts = get_prompts()
    return prompts["terminal-guide"]

# --- Tool Definitions ---

@mcp_app.tool()
async def terminal(
    context: Context,
    line: str,
    session_id: Optional[str] = None,
) -> dict[str, Any]:
    """
    Executes one command line in a virtual terminal session.

    Args:
        line: The command line, e.g. 'ls', 'cat README.txt', 'mkdir notes', 'cd home'.
        session_id: The terminal session to use. Each session has its own files and working directory.

    Returns:
        A dictionary with the structured result, the working directory and the prompt after the command.
    """
    sid = _session_id(session_id)
    logger.info(f"Executing terminal line '{line}' in session '{sid}'")
    try:
        manager = get_session_manager()
        session = manager.get_session(sid)
        result = manager.execute(line, sid)
        payload = result.model_dump() if result is not None else None
        status = "error" if result is not None and result.kind == "error" else "success"
        return {"status": status, "result": payload, "cwd": session.cwd, "prompt": session.prompt}

    except Exception as e:
        logger.error(f"Error executing terminal line: {e}", exc_info=True)
        return {"status": "error", "error": str(e)}


@mcp_app.tool()
async def history(
    context: Context,
    session_id: Optional[str] = None,
) -> dict[str, Any]:
    """
    Returns the transcript of a terminal session in the order commands were run.

    Args:
        session_id: The terminal session to read.

    Returns:
        A dictionary containing the list of executed commands and their results.
    """
    sid = _session_id(session_id)
    logger.info(f"Reading history of session '{sid}'")
    try:
        session = get_session_manager().get_session(sid)
        return {"status": "success", "result": session.transcript(), "cwd": session.cwd}

    except Exception as e:
        logger.error(f"Error reading session history: {e}", exc_info=True)
        return {"status": "error", "error": str(e)}


@mcp_app.tool()
async def reset_session(
    context: Context,
    session_id: Optional[str] = None,
) -> dict[str, Any]:
    """
    Starts a terminal session over from the initial files.

    Args:
        session_id: The terminal session to reset.

    Returns:
        A dictionary with the working directory of the fresh session.
    """
    sid = _session_id(session_id)
    logger.info(f"Resetting session '{sid}'")
    try:
        session = get_session_manager().reset_session(sid)
        return {"status": "success", "cwd": session.cwd, "prompt": session.prompt}

    except Exception as e:
        logger.error(f"Error resetting session: {e}", exc_info=True)
        return {"status": "error", "error": str(e)}
