"""Public surface for the fileloop feature."""

from .adapters import LocalContentLoader
from .domain import (
    AllFilesProcessed,
    CaseFold,
    FileBinding,
    FileLoopError,
    FileSequence,
    LoopState,
    MatchReport,
    NoOperationInProgress,
    OperationInProgress,
    ReplaceAnswer,
    ReplaceOutcome,
    RevertMode,
)
from .usecases import (
    Controller,
    ReplaceSession,
    RevertPolicy,
    SearchSession,
    Session,
    Workspace,
    perform_replace,
)

__all__ = [
    "LocalContentLoader",
    "AllFilesProcessed",
    "CaseFold",
    "FileBinding",
    "FileLoopError",
    "FileSequence",
    "LoopState",
    "MatchReport",
    "NoOperationInProgress",
    "OperationInProgress",
    "ReplaceAnswer",
    "ReplaceOutcome",
    "RevertMode",
    "Controller",
    "ReplaceSession",
    "RevertPolicy",
    "SearchSession",
    "Session",
    "Workspace",
    "perform_replace",
]
