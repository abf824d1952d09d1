"""The engine's two loggers: one for the core, one for client code."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

DEFAULT_LOG_FILE = Path("logs") / "kon.log"

_CORE_NAME = "kon.core"
_CLIENT_NAME = "kon.client"
_CONSOLE_FORMAT = "[%(asctime)s %(name)s] %(message)s"
_FILE_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
_TIME_FORMAT = "%H:%M:%S"


def core_logger() -> logging.Logger:
    return logging.getLogger(_CORE_NAME)


def client_logger() -> logging.Logger:
    return logging.getLogger(_CLIENT_NAME)


def configure_logging(
    log_file: str | Path | None = DEFAULT_LOG_FILE,
) -> tuple[logging.Logger, logging.Logger]:
    """Send both loggers to stdout and, when given, a truncated log file.

    Calling it again replaces the handlers installed earlier.
    """
    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT, _TIME_FORMAT))
    handlers.append(console)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, _TIME_FORMAT))
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(logging.DEBUG)

    loggers = (core_logger(), client_logger())
    for logger in loggers:
        for old in list(logger.handlers):
            logger.removeHandler(old)
            old.close()
        for handler in handlers:
            logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
    return loggers