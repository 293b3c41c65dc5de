"""
Command-line entry point of the TermaCraft terminal server.

Loads `.env`, configures logging from LOG_LEVEL and starts the MCP app on the
configured transport.
"""

import logging
import os
import sys

from dotenv import load_dotenv


def setup_environment() -> bool:
    """Loads `.env` and configures root logging. Returns False if the log level is invalid."""
    load_dotenv()

    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        print(f"Unknown LOG_LEVEL: {log_level}", file=sys.stderr)
        return False

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger(__name__).debug("Logging configured at %s", log_level)
    return True


def run_server() -> None:
    if not setup_environment():
        sys.exit(1)

    # The server reads its settings at import time, after .env is loaded.
    from .server import mcp_app, server_config

    logger = logging.getLogger(__name__)
    transport = server_config.MCP_TRANSPORT
    if transport == "stdio":
        logger.info("Starting TermaCraft terminal server on stdio")
    else:
        logger.info(
            "Starting TermaCraft terminal server on %s at %s:%s",
            transport,
            server_config.MCP_HOST,
            server_config.MCP_PORT,
        )

    mcp_app.run(transport=transport)


if __name__ == "__main__":
    run_server()
