"""Shared constants — single source of truth for cross-module values.

StrEnum members are str-compatible, so payloads and JSON schemas
built from them work unchanged.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class CommandName(StrEnum):
    """Names accepted in the ``command`` argument of the scc tool."""

    ANALYZE = "analyze"
    HOTSPOTS = "hotspots"
    FILE = "file"
    COMPARE = "compare"


class CommandStatus(StrEnum):
    """Outcome recorded by the command logger."""

    OK = "ok"
    ERROR = "error"


# Sorted once; reused by the unknown-command payload and the tool schema
AVAILABLE_COMMANDS: list[str] = sorted(c.value for c in CommandName)

# ── scc invocation ───────────────────────────────────────

SCC_DEFAULT_BINARY = "scc"
SCC_BASE_ARGS: tuple[str, ...] = ("-f", "json", "--by-file")

# ── Hotspots ─────────────────────────────────────────────

DEFAULT_HOTSPOT_THRESHOLD = 20

# ── MCP tool metadata ────────────────────────────────────

TOOL_NAME = "scc"
TOOL_DESCRIPTION = "scc code metrics: analyze, hotspots, file, compare"
SERVER_NAME = "scc-mcp"
SERVER_INSTRUCTIONS = (
    "Code metrics for a local path — lines, complexity and "
    "language breakdown computed by scc"
)

# ── Error payload messages ───────────────────────────────

UNKNOWN_COMMAND_ERROR = "Unknown command"
HANDLER_FAILURE_ERROR = "Failed to handle command"

# Max characters of a fault message kept in structured log records
ERROR_TRUNCATION_CHARS = 500
