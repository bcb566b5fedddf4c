"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from crossfile.features.fileloop import CaseFold, RevertMode


@final
@dataclass(slots=True)
class SearchArgs:
    """Command line arguments for the ``search`` subcommand."""

    command: Literal["search"]
    pattern: str
    files: list[Path]
    files_from: str | None
    case_fold: CaseFold
    revert_mode: RevertMode
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ReplaceArgs:
    """Command line arguments for the ``replace`` subcommand."""

    command: Literal["replace"]
    source: str
    replacement: str
    files: list[Path]
    files_from: str | None
    case_fold: CaseFold
    revert_mode: RevertMode
    delimited: bool
    assume_yes: bool
    verbose: bool
    quiet: bool


CLIArgs = SearchArgs | ReplaceArgs

__all__ = ["CLIArgs", "ReplaceArgs", "SearchArgs"]
