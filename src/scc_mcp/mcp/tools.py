"""MCP tool definition: the single ``scc`` tool."""

# pyright: reportUnusedFunction=false
# Registered via @mcp.tool decorator

from __future__ import annotations

from typing import Annotated, Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from scc_mcp.commands import dispatch
from scc_mcp.constants import (
    AVAILABLE_COMMANDS,
    TOOL_DESCRIPTION,
    TOOL_NAME,
)


def register_tools(mcp: FastMCP) -> None:
    """Register the scc tool on *mcp* (standalone server or host)."""

    @mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    async def scc(
        command: Annotated[
            str,
            Field(
                description="Command to run",
                # Advertised only; the dispatcher rejects unknown names
                json_schema_extra={"enum": list(AVAILABLE_COMMANDS)},
            ),
        ],
        path: Annotated[
            str | None,
            Field(description="Path to file or directory to analyze"),
        ] = None,
        file_path: Annotated[
            str | None,
            Field(description="Path to specific file (for file command)"),
        ] = None,
        path_a: Annotated[
            str | None,
            Field(description="First directory for comparison"),
        ] = None,
        path_b: Annotated[
            str | None,
            Field(description="Second directory for comparison"),
        ] = None,
        threshold: Annotated[
            int | float | None,
            Field(
                description="Minimum complexity for hotspots (default: 20)"
            ),
        ] = None,
    ) -> str:
        params = _collect_params(
            command=command,
            path=path,
            file_path=file_path,
            path_a=path_a,
            path_b=path_b,
            threshold=threshold,
        )
        from scc_mcp.mcp.server import (
            get_command_logger,
            get_settings,
        )

        response = await dispatch(
            params,
            settings=get_settings(),
            command_logger=get_command_logger(),
        )
        if response.is_error:
            raise ToolError(response.text)
        return response.text


def _collect_params(**kwargs: Any) -> dict[str, Any]:
    """Drop arguments the client did not send."""
    return {k: v for k, v in kwargs.items() if v is not None}
