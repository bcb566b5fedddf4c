"""Filesystem adapters for the fileloop feature."""

from .local import LocalContentLoader

__all__ = ["LocalContentLoader"]
