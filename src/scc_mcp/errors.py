"""Error hierarchy for scc invocation and result lookup.

Every failure of the metrics adapter is an :class:`SccError`, so
command handlers convert a single exception type into an
``{"error": ...}`` payload. Anything else reaching the dispatcher is
treated as an unexpected fault.
"""

from __future__ import annotations


class SccError(Exception):
    """Base class for metrics adapter failures."""


class SccNotFoundError(SccError):
    """The scc binary is missing or cannot be executed."""


class SccInvocationError(SccError):
    """scc exited non-zero or produced no output."""


class SccTimeoutError(SccError):
    """scc did not finish within the configured timeout."""


class SccOutputError(SccError):
    """scc output is not a JSON array of language groups."""


class FileMetricsNotFoundError(SccError):
    """A single-file run produced no file records."""

    def __init__(self, file_path: str) -> None:
        super().__init__(f"No metrics found for file: {file_path}")
        self.file_path = file_path
