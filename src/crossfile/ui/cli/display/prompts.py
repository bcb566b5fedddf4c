"""Interactive confirmations backing the fileloop confirmation ports."""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from crossfile.features.fileloop import MatchReport, ReplaceAnswer
from crossfile.features.fileloop.usecases import revert_prompt

REPLACE_CHOICES: dict[str, ReplaceAnswer] = {answer.value: answer for answer in ReplaceAnswer}


@final
class RevertPrompt:
    """Ask on the console whether a changed file should be reread."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def __call__(self, identifier: str, has_unsaved_edits: bool) -> bool:
        question = escape(revert_prompt(identifier, has_unsaved_edits).strip())
        return Confirm.ask(question, console=self.console, default=False)


@final
class ReplacePrompt:
    """Ask on the console before each replacement.

    ``y`` replace, ``n`` skip this match, ``!`` replace the rest of the file,
    ``s`` leave the rest of the file, ``q`` stop replacing.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def __call__(self, report: MatchReport, replacement: str) -> ReplaceAnswer:
        self.console.print(
            f"[bold white]{escape(report.identifier)}[/bold white]:{report.line}:{report.column}: "
            f"{escape(report.text)}"
        )
        try:
            choice = Prompt.ask(
                f"Replace with [green]{escape(replacement)}[/green]?",
                console=self.console,
                choices=list(REPLACE_CHOICES),
                default=ReplaceAnswer.YES.value,
            )
        except (EOFError, KeyboardInterrupt):
            self.console.print("[yellow]Replacement cancelled by user.")
            return ReplaceAnswer.QUIT
        return REPLACE_CHOICES[choice]


__all__ = ["RevertPrompt", "ReplacePrompt"]
