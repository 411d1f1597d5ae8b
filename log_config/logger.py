"""Loguru setup shared by the detector packages.

Importing this module swaps loguru's default sink for a coloured INFO
console sink. Rotating files are opt-in through ``setup_file_logging``.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]}:{function}:{line} - {message}"

logger.remove()
logger.configure(extra={"name": "detector"})
logger.add(sys.stderr, level="INFO", format=CONSOLE_FORMAT, colorize=True)


def setup_file_logging(logs_dir: Union[str, Path] = "logs") -> list[int]:
    """Write DEBUG and above to ``detector_*.log`` and errors to ``errors_*.log``.

    Returns the sink ids so a caller (or a test) can remove them again.
    """
    logs_dir = Path(logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)
    sinks = (
        ("detector_{time}.log", "DEBUG", "20 MB", "7 days"),
        ("errors_{time}.log", "ERROR", "5 MB", "30 days"),
    )
    return [
        logger.add(
            logs_dir / pattern,
            level=level,
            rotation=rotation,
            retention=retention,
            format=FILE_FORMAT,
            enqueue=True,  # detector may run off the capture thread
        )
        for pattern, level, rotation, retention in sinks
    ]


def get_logger(name: Optional[str] = None):
    """Logger tagged with ``name`` (usually the calling module's ``__name__``)."""
    if name:
        return logger.bind(name=name)
    return logger


def log_performance(operation: str, duration_ms: float, threshold_ms: float = 100.0) -> None:
    """Report how long ``operation`` took; WARNING once it passes ``threshold_ms``."""
    if duration_ms > threshold_ms:
        logger.warning(f"{operation} took {duration_ms:.2f}ms, over the {threshold_ms:.0f}ms limit")
    else:
        logger.debug(f"{operation} took {duration_ms:.2f}ms")


__all__ = ["logger", "get_logger", "log_performance", "setup_file_logging"]
