"""Command line interface entry points."""

from .cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
