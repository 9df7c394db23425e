"""CLI entry point — ``scc-mcp mcp`` and one-shot scc commands."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Any

from scc_mcp import __version__
from scc_mcp.config import Settings
from scc_mcp.constants import CommandName
from scc_mcp.logging_config import setup_logging


def main() -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args()

    if args.version:
        print(f"scc-mcp {__version__}")
        return

    if args.command is None:
        parser.print_help()
        return

    settings = _load_settings(args)
    setup_logging(settings.log_level)

    if args.command == "mcp":
        _run_mcp(args, settings)
    else:
        sys.exit(_run_command(args, settings))


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="scc-mcp",
        description=(
            "Code metrics from scc — "
            "served over MCP or printed as JSON."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    parser.add_argument(
        "--scc-binary",
        default=None,
        help="scc executable override (default: from settings)",
    )

    sub = parser.add_subparsers(dest="command")

    mcp_parser = sub.add_parser(
        "mcp",
        help="Start MCP server",
    )
    mcp_parser.add_argument(
        "--transport",
        "-t",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    mcp_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help=(
            "Bind address for SSE transport "
            "(default: 127.0.0.1)"
        ),
    )
    mcp_parser.add_argument(
        "--port",
        type=int,
        default=8001,
        help="Port for SSE transport (default: 8001)",
    )

    analyze = sub.add_parser(
        CommandName.ANALYZE,
        help="Summary and language breakdown for a path",
    )
    analyze.add_argument("path", help="File or directory to analyze")

    hotspots = sub.add_parser(
        CommandName.HOTSPOTS,
        help="Files at or above a complexity threshold",
    )
    hotspots.add_argument("path", help="Directory to analyze")
    hotspots.add_argument(
        "--threshold",
        type=_number,
        default=None,
        help="Minimum complexity to include (default: from settings)",
    )

    file_parser = sub.add_parser(
        CommandName.FILE,
        help="Metrics for a single file",
    )
    file_parser.add_argument("file_path", help="File to analyze")

    compare = sub.add_parser(
        CommandName.COMPARE,
        help="Summary diff between two directories (B minus A)",
    )
    compare.add_argument("path_a", help="First directory")
    compare.add_argument("path_b", help="Second directory")

    return parser


def _number(value: str) -> int | float:
    """Parse an int when possible, else a float."""
    try:
        return int(value)
    except ValueError:
        return float(value)


def _load_settings(args: argparse.Namespace) -> Settings:
    overrides: dict[str, Any] = {}
    if args.scc_binary:
        overrides["scc_binary"] = args.scc_binary
    return Settings(**overrides)


def _command_params(args: argparse.Namespace) -> dict[str, Any]:
    """Translate parsed CLI args into a dispatcher mapping."""
    params: dict[str, Any] = {"command": str(args.command)}
    for key in ("path", "file_path", "path_a", "path_b", "threshold"):
        value = getattr(args, key, None)
        if value is not None:
            params[key] = value
    return params


def _run_command(args: argparse.Namespace, settings: Settings) -> int:
    """Run one command, print its payload, return the exit status."""
    from scc_mcp.commands import dispatch
    from scc_mcp.logger import CommandLogger

    response = asyncio.run(
        dispatch(
            _command_params(args),
            settings=settings,
            command_logger=CommandLogger(
                log_dir=settings.log_dir, level=settings.log_level
            ),
        )
    )
    print(response.text)
    return 1 if response.is_error else 0


def _run_mcp(args: argparse.Namespace, settings: Settings) -> None:
    """Start the MCP server."""
    asyncio.run(
        _setup_and_run_mcp(
            settings,
            args.transport,
            args.host,
            args.port,
        )
    )


async def _setup_and_run_mcp(
    settings: Settings,
    transport: str = "stdio",
    host: str = "127.0.0.1",
    port: int = 8001,
) -> None:
    """Configure the server, then serve until the client disconnects."""
    from scc_mcp.mcp import configure, mcp

    configure(settings)

    if transport == "stdio":
        await mcp.run_async(transport="stdio")
    else:
        await mcp.run_async(
            transport="sse", host=host, port=port
        )


if __name__ == "__main__":
    main()
