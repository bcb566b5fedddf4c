"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    return ensure_directory(path.parent)


def write_text_atomic(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Replace ``path`` with ``content`` via a sibling temporary file.

    Readers never observe a half-written file; the original permission bits
    are carried over when the target already exists.
    """

    parent = ensure_parent_directory(path)
    mode = stat.S_IMODE(path.stat().st_mode) if path.exists() else None

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            _ = handle.write(content)
        if mode is not None:
            os.chmod(tmp_path, mode)
        _ = tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


__all__ = ["ensure_directory", "ensure_parent_directory", "write_text_atomic"]
