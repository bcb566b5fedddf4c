"""Rich console handler that renders file paths compactly and in white."""

from __future__ import annotations

import logging
from typing import Any, Final

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text

ELLIPSIS: Final[str] = "…"
PATH_STYLE: Final[str] = "bold white"


def _separator_for(path: str) -> str:
    return "\\" if "\\" in path and "/" not in path else "/"


def _is_absolute(path: str) -> bool:
    return path.startswith(("/", "\\")) or (len(path) > 2 and path[1] == ":")


class FilePathRichHandler(RichHandler):
    """Rich handler that highlights the ``file_path`` extra of a record.

    Paths beneath ``base_path`` render relative to it; other absolute paths
    keep only their last ``max_parts`` segments behind an ellipsis.
    """

    base_path: str | None
    max_parts: int

    def __init__(self, *args: Any, base_path: str | None = None, max_parts: int = 4, **kwargs: Any) -> None:
        kwargs.setdefault("show_path", False)
        kwargs.setdefault("markup", False)
        super().__init__(*args, **kwargs)
        self.base_path = base_path
        self.max_parts = max_parts

    def format_path(self, path: str, base_path: str | None = None) -> str:
        """Return the compact display form of ``path``."""

        sep = _separator_for(path)
        base = base_path if base_path is not None else self.base_path
        if base:
            prefix = base.rstrip("/\\") + sep
            if path.startswith(prefix) and len(path) > len(prefix):
                return path[len(prefix):]

        if not _is_absolute(path):
            return path
        parts = [part for part in path.split(sep) if part]
        if len(parts) <= self.max_parts:
            return path
        return ELLIPSIS + sep + sep.join(parts[-self.max_parts:])

    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        rendered = super().render_message(record, message)
        raw_path = getattr(record, "file_path", None)
        if raw_path is None or not isinstance(rendered, Text):
            return rendered

        path = str(raw_path)
        compact = self.format_path(path, getattr(record, "base_path", None))
        index = rendered.plain.find(path)
        if index < 0:
            return rendered

        return rendered[:index] + Text(compact, style=PATH_STYLE) + rendered[index + len(path):]


__all__ = ["FilePathRichHandler"]
