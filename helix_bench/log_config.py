"""Logging setup for the helix_bench command line."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def setup_logger(
    name: str = "helix_bench",
    level: int | str = logging.INFO,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure and return the package logger.

    Console output is terse (``[LEVEL] message``); the optional file handler
    records everything at DEBUG with timestamps. Calling again replaces the
    handlers rather than stacking them.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    logger.propagate = False
    return logger
