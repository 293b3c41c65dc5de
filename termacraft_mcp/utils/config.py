"""Settings for the terminal server, read from the environment."""

from pydantic_settings import BaseSettings


class ServiceConfig(BaseSettings):
    """
    Server settings. Every field can be overridden by an environment variable
    of the same name; main.py loads a .env file into the environment first.
    """

    MCP_TRANSPORT: str = "stdio"  # "stdio", "sse" or "streamable-http"
    MCP_HOST: str = "0.0.0.0"
    MCP_PORT: int = 8660  # Ignored by the stdio transport
    DEFAULT_SESSION_ID: str = "default"  # Session for tool calls that name none

    class Config:
        extra = "ignore"
