"""Command line argument parsing."""

from .options import CLIArgs, ReplaceArgs, SearchArgs
from .parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "ReplaceArgs", "SearchArgs"]
