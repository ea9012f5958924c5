"""Application logger setup.

Where: platform/logging/config.py
What: Build the ``tunetree`` logger from a Rich console handler and an optional rotating file.
Why: The CLI reconfigures verbosity and the log file at runtime; library code only imports ``logger``.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from rich.console import Console

from tunetree.config.paths import default_log_file

from .handlers import LibraryRichHandler

LOGGER_NAME: Final[str] = "tunetree"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

_FILE_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 5


def _console_handler(level: int) -> logging.Handler:
    handler = LibraryRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = log_file.expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        target, maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the application logger.

    Calling this again replaces the handlers from the previous call, so the
    CLI can switch verbosity or log file after import.

    Args:
        log_file: Rotating log file to write. ``None`` logs to the console only.
        console_level: Minimum level shown on stderr.
        file_level: Minimum level written to ``log_file``.

    Returns:
        logging.Logger: The ``tunetree`` logger.
    """
    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)

    for old in list(app_logger.handlers):
        app_logger.removeHandler(old)
        old.close()

    app_logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        app_logger.addHandler(_file_handler(Path(log_file), file_level))
    return app_logger


# Console-only until the CLI reconfigures it
logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "setup_logger", "logger"]
