"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Attach the rich console handler and optional rotating log file to the crossfile logger.
Why: Let the CLI pick verbosity per run while feature modules just call logging.getLogger.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from crossfile.platform.filesystem import ensure_parent_directory

from .handlers import FilePathRichHandler

LOGGER_NAME: Final[str] = "crossfile"
LOG_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 5


def _rotating_file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    _ = ensure_parent_directory(target)
    handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    *,
    base_path: str | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Reset the crossfile logger's handlers for one CLI run.

    Console output goes to stderr so match listings on stdout stay clean.
    ``base_path`` shortens logged file paths beneath it.
    """

    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)

    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)

    console_handler = FilePathRichHandler(
        console=console or Console(stderr=True, soft_wrap=True),
        base_path=base_path,
    )
    console_handler.setLevel(console_level)
    app_logger.addHandler(console_handler)

    if log_file is not None:
        app_logger.addHandler(_rotating_file_handler(log_file, file_level))

    return app_logger


logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)


__all__ = ["LOGGER_NAME", "setup_logger", "logger"]
