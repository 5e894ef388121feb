"""
Logging Configuration
=====================

Configures the root logger with a console handler and an optional file
handler. Safe to call more than once: if the root logger already has
handlers (tests, repeated ``create_application`` calls) nothing changes.
"""
import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case insensitive
        logfile: Optional path of a file to also write log records to
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
