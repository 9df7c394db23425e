"""One handler per command: call the adapter, shape the payload.

Adapter failures (:class:`SccError`) become ``{"error": ...}``
payloads here; anything else is left to the dispatcher.
"""

from __future__ import annotations

from typing import Any

from scc_mcp.commands.schemas import (
    AnalyzeCommand,
    CompareCommand,
    FileCommand,
    HotspotsCommand,
)
from scc_mcp.config import Settings
from scc_mcp.errors import SccError
from scc_mcp.metrics import (
    analyze_project,
    compare_summaries,
    get_complexity_hotspots,
    get_file_metrics,
    run_scc,
)


async def handle_analyze(
    cmd: AnalyzeCommand, settings: Settings
) -> dict[str, Any]:
    try:
        result = await analyze_project(cmd.path, settings=settings)
    except SccError as exc:
        return {"error": str(exc)}
    return {
        "summary": result.summary.to_payload(),
        "by-language": result.by_language_payload(),
        "file-count": len(result.files),
        "path": cmd.path,
    }


async def handle_hotspots(
    cmd: HotspotsCommand, settings: Settings
) -> dict[str, Any]:
    threshold = (
        cmd.threshold
        if cmd.threshold is not None
        else settings.hotspot_threshold
    )
    try:
        result = await run_scc(cmd.path, settings=settings)
    except SccError as exc:
        return {"error": str(exc)}
    hotspots = get_complexity_hotspots(result.raw, threshold)
    return {
        "hotspots": [h.to_payload() for h in hotspots],
        "count": len(hotspots),
        "threshold": threshold,
        "path": cmd.path,
    }


async def handle_file(
    cmd: FileCommand, settings: Settings
) -> dict[str, Any]:
    """Return the file record itself, unwrapped."""
    try:
        record = await get_file_metrics(cmd.file_path, settings=settings)
    except SccError as exc:
        return {"error": str(exc)}
    return record.to_payload()


async def handle_compare(
    cmd: CompareCommand, settings: Settings
) -> dict[str, Any]:
    try:
        result_a = await analyze_project(cmd.path_a, settings=settings)
    except SccError as exc:
        return {"error": f"Error analyzing {cmd.path_a}: {exc}"}
    try:
        result_b = await analyze_project(cmd.path_b, settings=settings)
    except SccError as exc:
        return {"error": f"Error analyzing {cmd.path_b}: {exc}"}

    diff = compare_summaries(result_a.summary, result_b.summary)
    return {
        "path_a": {
            "path": cmd.path_a,
            "summary": result_a.summary.to_payload(),
        },
        "path_b": {
            "path": cmd.path_b,
            "summary": result_b.summary.to_payload(),
        },
        "diff": diff.to_payload(),
    }
