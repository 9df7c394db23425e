"""Command dispatcher — the closed set of scc tool commands."""

from scc_mcp.commands.dispatcher import (
    dispatch,
    parse_command,
    run_command,
    tool_definition,
)
from scc_mcp.commands.schemas import (
    AnalyzeCommand,
    Command,
    CommandResponse,
    CompareCommand,
    FileCommand,
    HotspotsCommand,
)

__all__ = [
    "AnalyzeCommand",
    "Command",
    "CommandResponse",
    "CompareCommand",
    "FileCommand",
    "HotspotsCommand",
    "dispatch",
    "parse_command",
    "run_command",
    "tool_definition",
]
