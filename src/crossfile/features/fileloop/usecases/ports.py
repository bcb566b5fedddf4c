"""Summary: Ports defining the capabilities the multi-file loop consumes.
Why: Keep the controller independent of disk I/O and interactive prompts."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.models import FileBinding, MatchReport, ReplaceAnswer


@runtime_checkable
class ContentLoaderPort(Protocol):
    """Port for reading and writing the persistent copy of a file."""

    def load_content(self, identifier: str) -> tuple[str, int | None]:
        """Return the file's text and its on-disk timestamp."""
        ...

    def disk_mtime(self, identifier: str) -> int | None:
        """Return the current on-disk timestamp, or None when the file is gone."""
        ...

    def write_back_content(self, identifier: str, content: str) -> int | None:
        """Persist ``content`` and return the new on-disk timestamp."""
        ...


class ScanPredicate(Protocol):
    """Inspect ``binding`` from its cursor; may move the cursor."""

    def __call__(self, binding: FileBinding) -> bool:
        ...


class OperateAction(Protocol):
    """Work on ``binding`` at the current match.

    A truthy result keeps the file current so the next turn rescans it; a
    falsy result finishes the file.
    """

    def __call__(self, binding: FileBinding) -> bool:
        ...


class RevertConfirm(Protocol):
    """Ask whether a file changed on disk should be reread."""

    def __call__(self, identifier: str, has_unsaved_edits: bool) -> bool:
        ...


class ReplaceConfirm(Protocol):
    """Ask what to do with one pending replacement."""

    def __call__(self, report: MatchReport, replacement: str) -> ReplaceAnswer:
        ...


class MatchNotifier(Protocol):
    """Receive the location of a search hit."""

    def __call__(self, report: MatchReport) -> None:
        ...


__all__ = [
    "ContentLoaderPort",
    "ScanPredicate",
    "OperateAction",
    "RevertConfirm",
    "ReplaceConfirm",
    "MatchNotifier",
]
