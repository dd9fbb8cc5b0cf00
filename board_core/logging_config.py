"""Logging setup for the status board."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

FORMAT = "[%(asctime)s] %(levelname)s %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | int = logging.WARNING, log_file: str | None = None, *, to_stderr: bool = True) -> logging.Logger:
    """Configure the root logger once per process.

    The live screen owns the terminal, so callers pass ``to_stderr=False`` there
    and only the file handler (if any) is installed.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError("unknown log level")

    handlers: list[logging.Handler] = []
    if to_stderr:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))
    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(level=level, format=FORMAT, datefmt=DATE_FORMAT, handlers=handlers, force=True)
    logger = logging.getLogger("board_core")
    logger.debug("logging initialized (level=%s)", logging.getLevelName(level))
    return logger
