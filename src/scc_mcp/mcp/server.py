"""MCP server: FastMCP instance with configure helpers."""

from __future__ import annotations

from fastmcp import FastMCP

from scc_mcp import __version__
from scc_mcp.config import Settings
from scc_mcp.constants import SERVER_INSTRUCTIONS, SERVER_NAME
from scc_mcp.logger import CommandLogger
from scc_mcp.mcp.tools import register_tools

mcp = FastMCP(
    name=SERVER_NAME,
    version=__version__,
    instructions=SERVER_INSTRUCTIONS,
)

_settings: Settings | None = None
_command_logger: CommandLogger | None = None

register_tools(mcp)


def configure(settings: Settings) -> None:
    """Set the settings and command logger used by the scc tool."""
    global _settings, _command_logger  # noqa: PLW0603
    _settings = settings
    _command_logger = CommandLogger(
        log_dir=settings.log_dir, level=settings.log_level
    )


def get_settings() -> Settings | None:
    """Settings set by :func:`configure`, if any.

    When unset, the dispatcher reads defaults from the environment
    per call.
    """
    return _settings


def get_command_logger() -> CommandLogger | None:
    """Command logger set by :func:`configure`, if any."""
    return _command_logger
