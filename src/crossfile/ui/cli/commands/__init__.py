"""CLI command implementations."""

from .executor import LoopCommand, iter_file_arguments
from .replace import ReplaceCommand
from .search import SearchCommand

__all__ = ["LoopCommand", "ReplaceCommand", "SearchCommand", "iter_file_arguments"]
