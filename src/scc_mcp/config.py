"""Environment-based configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

from scc_mcp.constants import (
    DEFAULT_HOTSPOT_THRESHOLD,
    SCC_DEFAULT_BINARY,
)

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Reads from .env file and environment variables."""

    # scc binary
    scc_binary: str = SCC_DEFAULT_BINARY
    # Appended after the base flags on every run
    scc_extra_args: Annotated[list[str], NoDecode] = []
    # None = wait for scc indefinitely
    scc_timeout_seconds: float | None = None

    # Hotspots
    hotspot_threshold: int | float = DEFAULT_HOTSPOT_THRESHOLD

    # Logging
    log_level: str = "INFO"
    log_dir: Path | None = None

    @field_validator("scc_extra_args", mode="before")
    @classmethod
    def _parse_extra_args(cls, v: Any) -> Any:
        """Accept comma-separated string or JSON array."""
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("scc_extra_args")
    @classmethod
    def _validate_extra_args(cls, v: list[str]) -> list[str]:
        reserved = {"-f", "--format", "--by-file"}
        clashes = [a for a in v if a in reserved]
        if clashes:
            logger.warning(
                "SCC_EXTRA_ARGS repeats flags set by scc-mcp: %s",
                ", ".join(clashes),
            )
        return v

    @field_validator("scc_timeout_seconds")
    @classmethod
    def _validate_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError(
                "scc_timeout_seconds must be positive when set"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "",
        "extra": "ignore",
    }
