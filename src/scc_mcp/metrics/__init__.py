"""Metrics adapter — run scc, normalize its output, derive views."""

from scc_mcp.metrics.queries import (
    compare_summaries,
    get_complexity_hotspots,
    get_file_metrics,
)
from scc_mcp.metrics.runner import (
    analyze_project,
    parse_scc_json,
    parse_scc_output,
    run_scc,
)
from scc_mcp.metrics.schemas import (
    AnalysisResult,
    FileRecord,
    HotspotRecord,
    LanguageGroup,
    LanguageMetrics,
    SccFile,
    Summary,
    SummaryDiff,
)

__all__ = [
    "AnalysisResult",
    "FileRecord",
    "HotspotRecord",
    "LanguageGroup",
    "LanguageMetrics",
    "SccFile",
    "Summary",
    "SummaryDiff",
    "analyze_project",
    "compare_summaries",
    "get_complexity_hotspots",
    "get_file_metrics",
    "parse_scc_json",
    "parse_scc_output",
    "run_scc",
]
