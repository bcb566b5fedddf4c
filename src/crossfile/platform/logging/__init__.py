"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the shared logger, setup helper, and custom Rich handler.
Why: Provide a single canonical import path for logging concerns.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import FilePathRichHandler

__all__ = [
    "FilePathRichHandler",
    "LOGGER_NAME",
    "logger",
    "setup_logger",
]
