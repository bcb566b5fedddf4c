"""Console rendering and prompts for the CLI."""

from .prompts import ReplacePrompt, RevertPrompt
from .result import ResultDisplay

__all__ = ["ReplacePrompt", "ResultDisplay", "RevertPrompt"]
