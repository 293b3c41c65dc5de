"""
Configuration and dependency management for the terminal MCP server.
"""

import logging
from functools import lru_cache

from termacraft_mcp.engine import CommandEngine, get_default_engine
from termacraft_mcp.utils.config import ServiceConfig
from termacraft_mcp.utils.session_manager import SessionManager

logger = logging.getLogger(__name__)


@lru_cache
def get_base_config() -> ServiceConfig:
    """
    Retrieves the base server configuration from environment variables.

    Cached so environment variables and .env files are parsed once.
    """
    return ServiceConfig()


@lru_cache
def get_command_engine() -> CommandEngine:
    """Returns the CommandEngine shared with sessions created outside the server."""
    logger.info("Initializing CommandEngine singleton.")
    return get_default_engine()


@lru_cache
def get_session_manager() -> SessionManager:
    """Returns the process-wide SessionManager, sharing the cached engine."""
    logger.info("Initializing SessionManager singleton.")
    return SessionManager(engine=get_command_engine())
