"""Structured JSON logger for command outcomes and failures."""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from scc_mcp.constants import ERROR_TRUNCATION_CHARS, CommandStatus
from scc_mcp.logging_config import LOG_DATEFMT, LOG_FORMAT

__all__ = ["CommandLogger", "LOG_FORMAT", "LOG_DATEFMT"]


class CommandLogger:
    """One JSON record per dispatched command."""

    def __init__(
        self, log_dir: Path | None = None, level: str = "INFO"
    ) -> None:
        self._logger = logging.getLogger("scc_mcp.command_log")
        self._logger.setLevel(getattr(logging, level.upper()))

        if log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file = (log_dir / "commands.log").resolve()
            known = {
                getattr(h, "baseFilename", None)
                for h in self._logger.handlers
            }
            if str(log_file) not in known:
                handler = logging.FileHandler(log_file)
                handler.setFormatter(logging.Formatter("%(message)s"))
                self._logger.addHandler(handler)

    def log_command(
        self,
        command: str,
        status: CommandStatus,
        duration_ms: float,
    ) -> None:
        self._logger.info(
            json.dumps({
                "type": "command",
                "timestamp": datetime.now(UTC).isoformat(),
                "command": command,
                "status": status,
                "duration_ms": round(duration_ms, 3),
            })
        )

    def log_error(self, command: str, error: str) -> None:
        self._logger.error(
            json.dumps({
                "type": "error",
                "timestamp": datetime.now(UTC).isoformat(),
                "command": command,
                "error": error[:ERROR_TRUNCATION_CHARS],
            })
        )
