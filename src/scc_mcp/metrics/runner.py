"""Run the scc binary and normalize its JSON output."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Sequence

from pydantic import TypeAdapter, ValidationError

from scc_mcp.config import Settings
from scc_mcp.constants import SCC_BASE_ARGS
from scc_mcp.errors import (
    SccInvocationError,
    SccNotFoundError,
    SccOutputError,
    SccTimeoutError,
)
from scc_mcp.metrics.schemas import (
    AnalysisResult,
    FileRecord,
    LanguageGroup,
    LanguageMetrics,
    Summary,
)

logger = logging.getLogger(__name__)

_GROUPS = TypeAdapter(list[LanguageGroup])


def parse_scc_output(groups: Sequence[LanguageGroup]) -> AnalysisResult:
    """Build summary, per-language table and flat file list.

    Files keep the order scc emitted them in.
    """
    files = [
        FileRecord(
            filename=f.filename,
            location=f.location,
            language=f.language,
            lines=f.lines,
            code=f.code,
            comment=f.comment,
            blank=f.blank,
            complexity=f.complexity,
            bytes=f.bytes,
        )
        for group in groups
        for f in group.files
    ]
    summary = Summary(
        total_lines=sum(g.lines for g in groups),
        total_code=sum(g.code for g in groups),
        total_comment=sum(g.comment for g in groups),
        total_blank=sum(g.blank for g in groups),
        total_complexity=sum(g.complexity for g in groups),
        total_bytes=sum(g.bytes for g in groups),
        file_count=len(files),
        language_count=len(groups),
    )
    by_language = {
        g.name: LanguageMetrics(
            lines=g.lines,
            code=g.code,
            comment=g.comment,
            blank=g.blank,
            complexity=g.complexity,
            file_count=g.count,
        )
        for g in groups
    }
    return AnalysisResult(
        summary=summary,
        by_language=by_language,
        files=files,
        raw=list(groups),
    )


def parse_scc_json(text: str) -> list[LanguageGroup]:
    """Decode scc's stdout into language groups.

    Raises :class:`SccOutputError` for malformed JSON or a document
    that is not an array of language groups.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SccOutputError(str(exc)) from exc
    try:
        return _GROUPS.validate_python(data)
    except ValidationError as exc:
        msg = f"Unexpected scc output: {exc.error_count()} invalid field(s)"
        raise SccOutputError(msg) from exc


async def run_scc(
    path: str,
    extra_args: Sequence[str] = (),
    *,
    settings: Settings | None = None,
) -> AnalysisResult:
    """Execute scc on *path* and return the parsed metrics.

    Spawns exactly one subprocess, never retries. A timeout applies
    only when ``scc_timeout_seconds`` is configured.
    """
    cfg = settings if settings is not None else Settings()
    cmd = [
        cfg.scc_binary,
        *SCC_BASE_ARGS,
        *cfg.scc_extra_args,
        *extra_args,
        path,
    ]
    logger.debug("Running scc on %s (args=%s)", path, list(extra_args))

    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        msg = f"Cannot execute {cfg.scc_binary}: {exc.strerror or exc}"
        raise SccNotFoundError(msg) from exc

    try:
        stdout, stderr = await asyncio.wait_for(
            proc.communicate(), timeout=cfg.scc_timeout_seconds
        )
    except TimeoutError:
        await _reap(proc)
        msg = (
            f"scc timed out after {cfg.scc_timeout_seconds}s "
            f"for path: {path}"
        )
        raise SccTimeoutError(msg) from None
    except asyncio.CancelledError:
        logger.debug("scc run cancelled for %s", path)
        await _reap(proc)
        raise

    out = stdout.decode("utf-8", errors="replace")
    err = stderr.decode("utf-8", errors="replace").strip()
    if proc.returncode != 0 or not out.strip():
        logger.debug(
            "scc failed for %s (exit=%s)", path, proc.returncode
        )
        raise SccInvocationError(
            err or f"scc returned no output for path: {path}"
        )

    return parse_scc_output(parse_scc_json(out))


async def _reap(proc: asyncio.subprocess.Process) -> None:
    """Kill an unfinished scc child and wait for it to exit."""
    if proc.returncode is None:
        proc.kill()
    await proc.wait()


async def analyze_project(
    directory: str, *, settings: Settings | None = None
) -> AnalysisResult:
    """Run scc on a directory with no extra arguments."""
    logger.info("Analyzing project %s", directory)
    return await run_scc(directory, settings=settings)
