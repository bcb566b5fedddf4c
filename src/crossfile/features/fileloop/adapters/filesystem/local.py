"""Filesystem adapter reading and writing file content for the loop."""

from __future__ import annotations

import os
from pathlib import Path

from crossfile.platform.filesystem import write_text_atomic

from ...usecases.ports import ContentLoaderPort


class LocalContentLoader(ContentLoaderPort):
    """Thin wrapper around the local filesystem."""

    encoding: str

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def load_content(self, identifier: str) -> tuple[str, int | None]:
        path = Path(identifier)
        # Read and stat from one descriptor so content and timestamp agree.
        with path.open("r", encoding=self.encoding, newline="") as handle:
            mtime = os.fstat(handle.fileno()).st_mtime_ns
            return handle.read(), mtime

    def disk_mtime(self, identifier: str) -> int | None:
        try:
            return Path(identifier).stat().st_mtime_ns
        except FileNotFoundError:
            return None

    def write_back_content(self, identifier: str, content: str) -> int | None:
        path = Path(identifier)
        write_text_atomic(path, content, encoding=self.encoding)
        return self.disk_mtime(identifier)


__all__ = ["LocalContentLoader"]
