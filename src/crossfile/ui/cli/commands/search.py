"""Search command implementation for the CLI."""

from __future__ import annotations

from typing import final

from crossfile.features.fileloop import MatchReport
from crossfile.ui.cli.args.options import SearchArgs

from .executor import LoopCommand


def _discard(report: MatchReport) -> None:
    _ = report


@final
class SearchCommand(LoopCommand[MatchReport]):
    """Report every match of a pattern across the given files."""

    args: SearchArgs

    def execute(self) -> list[MatchReport]:
        search = self.controller.initialize_search(
            self.args.pattern,
            self.file_source(),
            self.args.case_fold,
            notifier=_discard if self.args.quiet else self.display.show_match,
            visit=False,
        )
        self.drive()
        self.display.show_search_summary(
            search.reports,
            files_scanned=self.files_scanned,
            errors=self.errors,
            quiet=self.args.quiet,
        )
        return search.reports
