"""Domain types for the fileloop feature."""

from .errors import AllFilesProcessed, FileLoopError, NoOperationInProgress, OperationInProgress
from .models import (
    CaseFold,
    FileBinding,
    LoopEvent,
    LoopState,
    MatchReport,
    ReplaceAnswer,
    ReplaceOutcome,
    RevertDecision,
    RevertMode,
)
from .sequence import FileSequence, FileSource

__all__ = [
    "AllFilesProcessed",
    "FileLoopError",
    "NoOperationInProgress",
    "OperationInProgress",
    "CaseFold",
    "FileBinding",
    "LoopEvent",
    "LoopState",
    "MatchReport",
    "ReplaceAnswer",
    "ReplaceOutcome",
    "RevertDecision",
    "RevertMode",
    "FileSequence",
    "FileSource",
]
