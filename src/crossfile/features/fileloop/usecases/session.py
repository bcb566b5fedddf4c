"""
Summary: Mutable state bundle for one round of multi-file scan-and-operate.
Why: Keep the controller's bookkeeping explicit instead of process-wide globals.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.models import FileBinding
from ..domain.sequence import FileSequence
from .ports import OperateAction, ScanPredicate


@dataclass(slots=True)
class Session:
    """State describing one multi-file round."""

    files: FileSequence
    scan: ScanPredicate
    operate: OperateAction
    visit: bool = True
    freshly_initialized: bool = True
    file_finished: bool = False
    # Cursor of the live binding before scanning restarted it from the top.
    saved_cursor: int | None = None
    current: FileBinding | None = None
    # Identifier pulled from ``files`` whose load has not succeeded yet.
    pending_identifier: str | None = None
    turns: int = 0

    @property
    def needs_advance(self) -> bool:
        """True when the next turn must move to another file before scanning."""

        return (
            self.freshly_initialized
            or self.file_finished
            or self.current is None
            or self.pending_identifier is not None
        )


__all__ = ["Session"]
