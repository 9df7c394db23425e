"""Singleton logging configuration.

setup_logging() configures the root logger once; later calls are
no-ops. Logs go to stderr; stdout carries stdio protocol frames and
the CLI JSON payloads.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

# Third-party loggers to suppress to WARNING
_SUPPRESSED_LOGGERS = (
    "mcp",
    "httpx",
    "uvicorn.access",
)

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Configure root logger and quiet third-party loggers.

    Idempotent — second call is a no-op.
    """
    global _configured  # noqa: PLW0603
    if _configured:
        return
    _configured = True

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stderr,
    )

    for name in _SUPPRESSED_LOGGERS:
        lg = logging.getLogger(name)
        lg.setLevel(logging.WARNING)
