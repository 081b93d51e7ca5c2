"""
logging_config.py — Centralized Logging Configuration

Configures one log format for the whole service, written to a console stream
and, when PIZZERIA_LOG_FILE is set, to a file as well.  Modules obtain their
loggers with ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = '%(asctime)s - %(levelname)s - [PID:%(process)d] - %(message)s'


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Configures the global logging system for the application.

    Args:
        level (str): Root log level name, e.g. "INFO" or "DEBUG".
        log_file (str | None): Optional path of a persistent log file.
        stream (TextIO | None): Console stream; stdout (Docker-compatible) by
            default. The CLI passes stderr so logs stay out of command output.

    Only the first call takes effect; later calls leave the root logger alone.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        handlers=handlers,
    )

    # Per-request access lines duplicate the router's own log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
