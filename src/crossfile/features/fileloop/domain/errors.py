"""
Summary: Error taxonomy for the multi-file loop.
Why: Callers distinguish "nothing started" from "round complete" without string matching.
"""

from __future__ import annotations


class FileLoopError(RuntimeError):
    """Base class for errors raised by the multi-file loop controller."""


class NoOperationInProgress(FileLoopError):
    """Raised when continuing before any session has been initialized."""

    def __init__(self) -> None:
        super().__init__("No operation in progress")


class AllFilesProcessed(FileLoopError):
    """Raised when the file sequence is exhausted and no match remains."""

    def __init__(self) -> None:
        super().__init__("All files processed")


class OperationInProgress(FileLoopError):
    """Raised when the controller is re-entered while a step is running."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Cannot {operation} while a multi-file step is in progress")
        self.operation: str = operation


__all__ = [
    "FileLoopError",
    "NoOperationInProgress",
    "AllFilesProcessed",
    "OperationInProgress",
]
