"""Shared test fixtures — canned scc output, fake subprocess."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from scc_mcp.config import Settings
from scc_mcp.metrics import LanguageGroup

# Two Go files, as emitted by `scc -f json --by-file`
SAMPLE_SCC_OUTPUT: list[dict[str, Any]] = [
    {
        "Name": "Go",
        "Lines": 100,
        "Code": 80,
        "Comment": 10,
        "Blank": 10,
        "Complexity": 5,
        "Bytes": 2000,
        "Count": 2,
        "Files": [
            {
                "Filename": "a.go",
                "Location": "/x",
                "Language": "Go",
                "Lines": 60,
                "Code": 50,
                "Comment": 5,
                "Blank": 5,
                "Complexity": 3,
                "Bytes": 1200,
            },
            {
                "Filename": "b.go",
                "Location": "/x",
                "Language": "Go",
                "Lines": 40,
                "Code": 30,
                "Comment": 5,
                "Blank": 5,
                "Complexity": 2,
                "Bytes": 800,
            },
        ],
    }
]


def scc_file(
    filename: str,
    language: str,
    complexity: int,
    *,
    location: str = "/repo",
    lines: int = 10,
    code: int = 8,
    comment: int = 1,
    blank: int = 1,
    size: int = 100,
) -> dict[str, Any]:
    """One scc file entry."""
    return {
        "Filename": filename,
        "Location": location,
        "Language": language,
        "Lines": lines,
        "Code": code,
        "Comment": comment,
        "Blank": blank,
        "Complexity": complexity,
        "Bytes": size,
    }


def scc_group(
    name: str, files: list[dict[str, Any]]
) -> dict[str, Any]:
    """A language group whose totals match its files."""
    return {
        "Name": name,
        "Lines": sum(f["Lines"] for f in files),
        "Code": sum(f["Code"] for f in files),
        "Comment": sum(f["Comment"] for f in files),
        "Blank": sum(f["Blank"] for f in files),
        "Complexity": sum(f["Complexity"] for f in files),
        "Bytes": sum(f["Bytes"] for f in files),
        "Count": len(files),
        "Files": files,
    }


def to_groups(data: list[dict[str, Any]]) -> list[LanguageGroup]:
    return [LanguageGroup.model_validate(g) for g in data]


def make_process(
    stdout: str = "",
    stderr: str = "",
    returncode: int = 0,
) -> MagicMock:
    """Stand-in for an asyncio subprocess that already finished."""
    proc = MagicMock()
    proc.returncode = returncode
    proc.communicate = AsyncMock(
        return_value=(stdout.encode(), stderr.encode())
    )
    proc.wait = AsyncMock(return_value=returncode)
    proc.kill = MagicMock()
    return proc


class FakeScc:
    """Replaces ``asyncio.create_subprocess_exec`` for scc runs.

    Results are keyed by the analyzed path (last argv element).
    Unknown paths exit 0 with empty output.
    """

    def __init__(self) -> None:
        self.results: dict[str, MagicMock] = {}
        self.calls: list[list[str]] = []

    def set_output(
        self,
        path: str,
        groups: list[dict[str, Any]] | None = None,
        *,
        stdout: str | None = None,
        stderr: str = "",
        returncode: int = 0,
    ) -> None:
        if stdout is None:
            stdout = json.dumps(groups) if groups is not None else ""
        self.results[path] = make_process(stdout, stderr, returncode)

    async def __call__(self, *cmd: str, **_kwargs: Any) -> MagicMock:
        self.calls.append(list(cmd))
        return self.results.get(cmd[-1], make_process())


@pytest.fixture
def fake_scc() -> Iterator[FakeScc]:
    fake = FakeScc()
    with patch(
        "scc_mcp.metrics.runner.asyncio.create_subprocess_exec",
        new=fake,
    ):
        yield fake


@pytest.fixture
def settings() -> Settings:
    """Defaults only — ignores .env and SCC_* variables."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        scc_binary="scc",
        scc_extra_args=[],
        scc_timeout_seconds=None,
        hotspot_threshold=20,
        log_dir=None,
    )


@pytest.fixture(autouse=True)
def _close_command_log_handlers() -> Iterator[None]:
    """Detach file handlers CommandLogger added during a test."""
    yield
    lg = logging.getLogger("scc_mcp.command_log")
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()
