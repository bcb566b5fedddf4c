"""Adapters binding fileloop ports to concrete infrastructure."""

from .filesystem import LocalContentLoader

__all__ = ["LocalContentLoader"]
