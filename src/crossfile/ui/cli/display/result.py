"""Result display functionality for CLI."""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape

from crossfile.features.fileloop import MatchReport, ReplaceOutcome


@final
class ResultDisplay:
    """Render matches and run summaries."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_match(self, report: MatchReport) -> None:
        """Print one search hit as ``path:line:column: text``."""

        self.console.print(
            f"[bold white]{escape(report.identifier)}[/bold white]"
            f":[cyan]{report.line}[/cyan]:{report.column}: {escape(report.text)}",
            highlight=False,
        )

    def show_search_summary(
        self,
        reports: list[MatchReport],
        *,
        files_scanned: int,
        errors: list[str],
        quiet: bool = False,
    ) -> None:
        """Print the totals of a search run."""

        if quiet:
            return

        files_matched = len({report.identifier for report in reports})
        self.console.print("\n[bold]Search Summary:[/bold]")
        self.console.print(f"Files scanned: {files_scanned}")
        self.console.print(f"[green]Matches: {len(reports)} in {files_matched} file(s)[/green]")
        self._show_errors(errors)

    def show_replace_summary(
        self,
        outcomes: list[ReplaceOutcome],
        *,
        files_scanned: int,
        errors: list[str],
        quiet: bool = False,
    ) -> None:
        """Print the totals of a replace run."""

        if quiet:
            return

        replaced = sum(outcome.replaced for outcome in outcomes)
        declined = sum(outcome.declined for outcome in outcomes)
        changed = sum(1 for outcome in outcomes if outcome.replaced)
        self.console.print("\n[bold]Replace Summary:[/bold]")
        self.console.print(f"Files scanned: {files_scanned}")
        self.console.print(f"[green]Replaced: {replaced} in {changed} file(s)[/green]")
        if declined:
            self.console.print(f"[yellow]Declined: {declined}[/yellow]")
        if any(outcome.quit for outcome in outcomes):
            self.console.print("[yellow]Stopped before processing every file.[/yellow]")
        self._show_errors(errors)

    def _show_errors(self, errors: list[str]) -> None:
        if not errors:
            return
        self.console.print(f"[red]Failed: {len(errors)}[/red]")
        for error in errors:
            self.console.print(f"[red]  • {escape(error)}[/red]")


__all__ = ["ResultDisplay"]
