"""Dispatch a ``{command, ...}`` mapping to its handler.

The dispatcher never raises: unknown commands and unexpected faults
are converted into error payloads, and every outcome is logged.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any, assert_never

from scc_mcp.commands.handlers import (
    handle_analyze,
    handle_compare,
    handle_file,
    handle_hotspots,
)
from scc_mcp.commands.schemas import (
    COMMAND_ADAPTER,
    AnalyzeCommand,
    Command,
    CommandResponse,
    CompareCommand,
    FileCommand,
    HotspotsCommand,
)
from scc_mcp.config import Settings
from scc_mcp.constants import (
    AVAILABLE_COMMANDS,
    HANDLER_FAILURE_ERROR,
    TOOL_DESCRIPTION,
    TOOL_NAME,
    UNKNOWN_COMMAND_ERROR,
    CommandStatus,
)
from scc_mcp.logger import CommandLogger

logger = logging.getLogger(__name__)


def parse_command(params: Mapping[str, Any]) -> Command:
    """Validate *params* into the matching command variant."""
    return COMMAND_ADAPTER.validate_python(dict(params))


async def run_command(
    cmd: Command, settings: Settings
) -> dict[str, Any]:
    match cmd:
        case AnalyzeCommand():
            return await handle_analyze(cmd, settings)
        case HotspotsCommand():
            return await handle_hotspots(cmd, settings)
        case FileCommand():
            return await handle_file(cmd, settings)
        case CompareCommand():
            return await handle_compare(cmd, settings)
        case _:
            assert_never(cmd)


async def dispatch(
    params: Mapping[str, Any],
    *,
    settings: Settings | None = None,
    command_logger: CommandLogger | None = None,
) -> CommandResponse:
    """Run one command and wrap its payload.

    Unknown names list the available commands; faults inside a
    known command (including invalid arguments) become a generic
    failure carrying the fault message.
    """
    name = params.get("command")

    if name not in AVAILABLE_COMMANDS:
        logger.warning("Unknown scc command: %r", name)
        return CommandResponse({
            "error": UNKNOWN_COMMAND_ERROR,
            "command": name,
            "available": list(AVAILABLE_COMMANDS),
        })

    start = time.perf_counter()
    try:
        # Defaults are read here so a bad environment is a command fault.
        cfg = settings if settings is not None else Settings()
        payload = await run_command(parse_command(params), cfg)
    except Exception as exc:  # noqa: BLE001
        logger.exception("scc command failed: %s", name)
        if command_logger is not None:
            command_logger.log_error(str(name), str(exc))
        payload = {
            "error": HANDLER_FAILURE_ERROR,
            "command": name,
            "details": str(exc),
        }

    response = CommandResponse(payload)
    if command_logger is not None:
        command_logger.log_command(
            str(name),
            CommandStatus.ERROR if response.is_error else CommandStatus.OK,
            (time.perf_counter() - start) * 1000,
        )
    return response


def tool_definition() -> dict[str, Any]:
    """MCP tool definition for hosts that register tools themselves."""
    return {
        "name": TOOL_NAME,
        "description": TOOL_DESCRIPTION,
        "inputSchema": {
            "type": "object",
            "properties": {
                "command": {
                    "type": "string",
                    "enum": list(AVAILABLE_COMMANDS),
                },
                "path": {
                    "type": "string",
                    "description": "Path to file or directory to analyze",
                },
                "file_path": {
                    "type": "string",
                    "description": (
                        "Path to specific file (for file command)"
                    ),
                },
                "path_a": {
                    "type": "string",
                    "description": "First directory for comparison",
                },
                "path_b": {
                    "type": "string",
                    "description": "Second directory for comparison",
                },
                "threshold": {
                    "type": "number",
                    "description": (
                        "Minimum complexity for hotspots (default: 20)"
                    ),
                },
            },
            "required": ["command"],
        },
    }
