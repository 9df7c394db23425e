"""Derived queries over scc results: hotspots, file lookup, diff."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from scc_mcp.config import Settings
from scc_mcp.errors import FileMetricsNotFoundError
from scc_mcp.metrics.runner import run_scc
from scc_mcp.metrics.schemas import (
    FileRecord,
    HotspotRecord,
    LanguageGroup,
    Summary,
    SummaryDiff,
)

logger = logging.getLogger(__name__)


def get_complexity_hotspots(
    raw_groups: Iterable[LanguageGroup], threshold: float
) -> list[HotspotRecord]:
    """Files with ``complexity >= threshold``, most complex first.

    The threshold is inclusive. Equal complexities are ordered by
    filename, then location.
    """
    matches = [
        f
        for group in raw_groups
        for f in group.files
        if f.complexity >= threshold
    ]
    matches.sort(key=lambda f: (-f.complexity, f.filename, f.location))
    return [
        HotspotRecord(
            filename=f.filename,
            location=f.location,
            language=f.language,
            complexity=f.complexity,
            lines=f.lines,
            code=f.code,
        )
        for f in matches
    ]


async def get_file_metrics(
    file_path: str, *, settings: Settings | None = None
) -> FileRecord:
    """Metrics for a single file.

    Adapter errors propagate; a run without file records raises
    :class:`FileMetricsNotFoundError`.
    """
    logger.debug("Getting file metrics for %s", file_path)
    result = await run_scc(file_path, settings=settings)
    if not result.files:
        raise FileMetricsNotFoundError(file_path)
    return result.files[0]


def compare_summaries(summary_a: Summary, summary_b: Summary) -> SummaryDiff:
    """Per-metric difference, B minus A."""
    return SummaryDiff(
        lines=summary_b.total_lines - summary_a.total_lines,
        code=summary_b.total_code - summary_a.total_code,
        complexity=summary_b.total_complexity - summary_a.total_complexity,
        files=summary_b.file_count - summary_a.file_count,
    )
