"""Pydantic models for scc output and the views derived from it.

Raw models (:class:`SccFile`, :class:`LanguageGroup`) validate scc's
PascalCase JSON. Derived models serialize with kebab-case keys
(``total-lines``, ``file-count``) via :meth:`PayloadModel.to_payload`.
"""

from typing import Any

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_pascal


def _kebab(name: str) -> str:
    return name.replace("_", "-")


# ── Raw scc JSON ─────────────────────────────────────────


class SccFile(BaseModel):
    """One entry of a language group's ``Files`` array."""

    model_config = ConfigDict(frozen=True, alias_generator=to_pascal)

    filename: str
    location: str = ""
    language: str
    lines: int = 0
    code: int = 0
    comment: int = 0
    blank: int = 0
    complexity: int = 0
    bytes: int = 0


class LanguageGroup(BaseModel):
    """One element of scc's top-level JSON array."""

    model_config = ConfigDict(frozen=True, alias_generator=to_pascal)

    name: str
    lines: int = 0
    code: int = 0
    comment: int = 0
    blank: int = 0
    complexity: int = 0
    bytes: int = 0
    count: int = 0
    files: list[SccFile] = Field(default_factory=lambda: list[SccFile]())

    @field_validator("files", mode="before")
    @classmethod
    def _null_files(cls, v: Any) -> Any:
        # scc emits "Files": null when --by-file finds nothing
        return [] if v is None else v


# ── Derived views ────────────────────────────────────────


class PayloadModel(BaseModel):
    """Frozen model whose payload keys are kebab-case."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=AliasGenerator(serialization_alias=_kebab),
    )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class FileRecord(PayloadModel):
    """Normalized per-file metrics."""

    filename: str
    location: str
    language: str
    lines: int
    code: int
    comment: int
    blank: int
    complexity: int
    bytes: int


class HotspotRecord(PayloadModel):
    """Narrow projection of a file used by the hotspot query."""

    filename: str
    location: str
    language: str
    complexity: int
    lines: int
    code: int


class LanguageMetrics(PayloadModel):
    """Per-language totals as reported by scc."""

    lines: int
    code: int
    comment: int
    blank: int
    complexity: int
    file_count: int


class Summary(PayloadModel):
    """Totals across every language group of one run."""

    total_lines: int = 0
    total_code: int = 0
    total_comment: int = 0
    total_blank: int = 0
    total_complexity: int = 0
    total_bytes: int = 0
    file_count: int = 0
    language_count: int = 0


class SummaryDiff(PayloadModel):
    """Signed per-metric difference, second run minus first."""

    lines: int
    code: int
    complexity: int
    files: int


class AnalysisResult(BaseModel):
    """Normalized view of one scc run, plus the groups it came from."""

    model_config = ConfigDict(frozen=True)

    summary: Summary
    by_language: dict[str, LanguageMetrics] = Field(
        default_factory=lambda: dict[str, LanguageMetrics]()
    )
    files: list[FileRecord] = Field(
        default_factory=lambda: list[FileRecord]()
    )
    raw: list[LanguageGroup] = Field(
        default_factory=lambda: list[LanguageGroup]()
    )

    def by_language_payload(self) -> dict[str, dict[str, Any]]:
        return {
            name: metrics.to_payload()
            for name, metrics in self.by_language.items()
        }
