"""Data structures describing file bindings and loop configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Final


class RevertMode(str, Enum):
    """How stale live bindings are refreshed before they are scanned."""

    SILENT = "silent"
    ALWAYS_ASK = "always-ask"
    NEVER = "never"

    @staticmethod
    def from_user_input(value: str) -> "RevertMode":
        """Translate raw CLI or config input into the matching mode."""

        normalized = value.strip().lower().replace("_", "-")
        for mode in RevertMode:
            if mode.value == normalized:
                return mode
        valid: Final[str] = ", ".join(m.value for m in RevertMode)
        msg = f"Unsupported revert policy '{value}'. Valid options: {valid}"
        raise ValueError(msg)


class RevertDecision(str, Enum):
    """Outcome of evaluating a stale binding against the revert policy."""

    RELOAD = "reload"
    ASK = "ask"
    LEAVE = "leave"


class CaseFold(str, Enum):
    """Case sensitivity override for pattern scans."""

    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"
    INHERIT = "inherit"


class LoopState(StrEnum):
    """States of the multi-file controller."""

    IDLE = "idle"
    SCANNING = "scanning"
    ADVANCING = "advancing"
    OPERATING = "operating"
    EXHAUSTED = "exhausted"


class LoopEvent(StrEnum):
    """Structured event identifiers for controller logs."""

    SESSION_START = "fileloop.session.start"
    SESSION_REPLACED = "fileloop.session.replaced"
    FILE_ADVANCE = "fileloop.file.advance"
    FILE_SCAN_MISS = "fileloop.file.scan.miss"
    FILE_REVERT = "fileloop.file.revert"
    FILE_REVERT_KEPT = "fileloop.file.revert.kept"
    FILE_LOAD_ERROR = "fileloop.file.load.error"
    FILE_PROMOTE = "fileloop.file.promote"
    FILE_OPERATE = "fileloop.file.operate"
    FILE_FINISHED = "fileloop.file.finished"
    FILE_SAVE = "fileloop.file.save"
    EXHAUSTED = "fileloop.exhausted"


@dataclass(eq=False)
class FileBinding:
    """In-memory content bound to a file identifier.

    ``cursor`` is an offset into ``content``. ``synced_mtime`` is the disk
    timestamp the content was last read from or written to. Ephemeral
    bindings exist only to test the scan predicate and are not registered
    in the workspace.
    """

    identifier: str
    content: str
    synced_mtime: int | None = None
    modified: bool = False
    cursor: int = 0
    ephemeral: bool = False

    def replace_content(self, content: str) -> None:
        """Swap in edited content and mark the binding modified."""

        self.content = content
        self.modified = True
        self.cursor = min(self.cursor, len(content))

    def position(self, offset: int | None = None) -> tuple[int, int]:
        """Return the 1-based (line, column) of ``offset`` (default: cursor)."""

        point = self.cursor if offset is None else offset
        line = self.content.count("\n", 0, point) + 1
        line_start = self.content.rfind("\n", 0, point) + 1
        return line, point - line_start + 1

    def line_text(self, offset: int) -> str:
        """Return the text of the line containing ``offset``."""

        start = self.content.rfind("\n", 0, offset) + 1
        end = self.content.find("\n", offset)
        if end == -1:
            end = len(self.content)
        return self.content[start:end]


@dataclass(slots=True, frozen=True)
class MatchReport:
    """Location of a search hit handed to the match notifier."""

    identifier: str
    start: int
    end: int
    line: int
    column: int
    text: str


class ReplaceAnswer(str, Enum):
    """Answers accepted when querying before each replacement."""

    YES = "y"
    NO = "n"
    ALL = "!"
    SKIP = "s"
    QUIT = "q"


@dataclass(slots=True)
class ReplaceOutcome:
    """Counts gathered while replacing matches in one file."""

    identifier: str
    replaced: int = 0
    declined: int = 0
    quit: bool = False
    saved: bool = False


__all__ = [
    "RevertMode",
    "RevertDecision",
    "CaseFold",
    "LoopState",
    "LoopEvent",
    "FileBinding",
    "MatchReport",
    "ReplaceAnswer",
    "ReplaceOutcome",
]
