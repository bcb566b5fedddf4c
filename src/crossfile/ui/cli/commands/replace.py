"""Replace command implementation for the CLI."""

from __future__ import annotations

from typing import final

from crossfile.features.fileloop import ReplaceOutcome, ReplaceSession
from crossfile.ui.cli.args.options import ReplaceArgs
from crossfile.ui.cli.display import ReplacePrompt

from .executor import LoopCommand


@final
class ReplaceCommand(LoopCommand[ReplaceOutcome]):
    """Query-replace a pattern across the given files."""

    args: ReplaceArgs
    replace: ReplaceSession | None = None

    def execute(self) -> list[ReplaceOutcome]:
        confirm = None if self.args.assume_yes else ReplacePrompt(self.display.console)
        self.replace = self.controller.initialize_replace(
            self.args.source,
            self.args.replacement,
            self.file_source(),
            self.args.case_fold,
            self.args.delimited,
            confirm=confirm,
        )
        self.drive()
        self.display.show_replace_summary(
            self.replace.outcomes,
            files_scanned=self.files_scanned,
            errors=self.errors,
            quiet=self.args.quiet,
        )
        return self.replace.outcomes

    def should_stop(self) -> bool:
        if self.replace is None or not self.replace.outcomes:
            return False
        return self.replace.outcomes[-1].quit
