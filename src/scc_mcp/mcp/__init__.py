"""MCP transport — FastMCP server exposing the scc tool."""

from scc_mcp.mcp.server import (
    configure,
    get_command_logger,
    get_settings,
    mcp,
)
from scc_mcp.mcp.tools import register_tools

__all__ = [
    "configure",
    "get_command_logger",
    "get_settings",
    "mcp",
    "register_tools",
]
