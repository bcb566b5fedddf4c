"""src/crossfile/ui/cli/commands/executor.py
What: Shared wiring for CLI commands that drive a multi-file round.
Why: Build the workspace, controller and file source the same way for every command.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path
from typing import Generic, TextIO, TypeVar

from crossfile.config.settings import (
    CASE_FOLD_SEARCH,
    FILE_ENCODING,
    REVERTIBLE_PATTERNS,
    SAVE_AFTER_REPLACE,
)
from crossfile.features.fileloop import (
    AllFilesProcessed,
    Controller,
    LocalContentLoader,
    RevertPolicy,
    Workspace,
)
from crossfile.platform.logging import logger
from crossfile.ui.cli.args.options import CLIArgs
from crossfile.ui.cli.display import ResultDisplay, RevertPrompt

ResultT = TypeVar("ResultT")


def iter_file_arguments(
    files: list[Path],
    files_from: str | None,
    *,
    stdin: TextIO | None = None,
) -> Iterator[str]:
    """Yield positional files first, then names read lazily from ``files_from``."""

    for path in files:
        yield str(path)

    if files_from is None:
        return

    if files_from == "-":
        stream = stdin or sys.stdin
        for line in stream:
            name = line.strip()
            if name:
                yield name
        return

    with open(files_from, encoding="utf-8") as handle:
        for line in handle:
            name = line.strip()
            if name:
                yield name


class LoopCommand(ABC, Generic[ResultT]):
    """Base class for commands that run one multi-file round."""

    args: CLIArgs
    controller: Controller
    display: ResultDisplay
    errors: list[str]

    def __init__(self, args: CLIArgs, *, display: ResultDisplay | None = None) -> None:
        self.args = args
        self.display = display or ResultDisplay()
        policy = RevertPolicy(
            args.revert_mode,
            revertible_patterns=REVERTIBLE_PATTERNS,
            confirm=RevertPrompt(self.display.console),
        )
        workspace = Workspace(LocalContentLoader(encoding=FILE_ENCODING), policy)
        self.controller = Controller(
            workspace,
            case_fold_search=CASE_FOLD_SEARCH,
            save_after_replace=SAVE_AFTER_REPLACE,
        )
        self.errors = []

    def file_source(self) -> Iterator[str]:
        """Return the lazily produced file identifiers for this run."""

        return iter_file_arguments(self.args.files, self.args.files_from)

    def drive(self) -> None:
        """Continue the active round until every file is processed or a turn asks to stop."""

        while True:
            try:
                _ = self.controller.continue_operation()
            except AllFilesProcessed:
                return
            except (OSError, UnicodeDecodeError) as e:
                skipped = self.controller.skip_file()
                self.errors.append(f"{skipped}: {e}")
                continue
            if self.should_stop():
                logger.info("Stopping at user request")
                return

    def should_stop(self) -> bool:
        """Return True to end the round early after a turn."""

        return False

    @property
    def files_scanned(self) -> int:
        session = self.controller.session
        return session.files.pulled if session is not None else 0

    @abstractmethod
    def execute(self) -> list[ResultT]:
        """Execute the command.

        Returns:
            Per-match or per-file results.
        """
        pass


__all__ = ["LoopCommand", "iter_file_arguments"]
