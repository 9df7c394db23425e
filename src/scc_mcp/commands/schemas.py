"""Command variants and the response envelope."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter

NonEmptyStr = Annotated[str, Field(min_length=1)]


class AnalyzeCommand(BaseModel):
    """Summary and per-language breakdown for a path."""

    command: Literal["analyze"]
    path: NonEmptyStr


class HotspotsCommand(BaseModel):
    """Files whose complexity meets a threshold."""

    command: Literal["hotspots"]
    path: NonEmptyStr
    # None = configured default
    threshold: int | float | None = None


class FileCommand(BaseModel):
    """Metrics for a single file."""

    command: Literal["file"]
    file_path: NonEmptyStr


class CompareCommand(BaseModel):
    """Summary diff between two paths (B minus A)."""

    command: Literal["compare"]
    path_a: NonEmptyStr
    path_b: NonEmptyStr


Command = Annotated[
    AnalyzeCommand | HotspotsCommand | FileCommand | CompareCommand,
    Field(discriminator="command"),
]

COMMAND_ADAPTER: TypeAdapter[Command] = TypeAdapter(Command)


@dataclass(frozen=True)
class CommandResponse:
    """A command payload plus its rendering for the transport."""

    payload: dict[str, Any]

    @property
    def is_error(self) -> bool:
        return "error" in self.payload

    @property
    def text(self) -> str:
        return json.dumps(self.payload, indent=2)

    def to_mcp(self) -> dict[str, Any]:
        """MCP tool-result shape: one text item, flagged on error."""
        result: dict[str, Any] = {
            "content": [{"type": "text", "text": self.text}]
        }
        if self.is_error:
            result["isError"] = True
        return result
