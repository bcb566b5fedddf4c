"""
Summary: Pull-based sequence of file identifiers consumed by the loop controller.
Why: Give lists, generators and producer callables one monotonic next() contract.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TypeAlias

FileIdentifier: TypeAlias = "str | os.PathLike[str]"
FileProducer: TypeAlias = "Callable[[], str | os.PathLike[str] | None]"
FileSource: TypeAlias = "Iterable[str | os.PathLike[str]] | FileProducer"


class FileSequence:
    """Lazily produced, monotonically consumed file identifiers.

    ``next()`` returns ``None`` once the source is exhausted and keeps doing
    so; the underlying iterator or producer is never polled again after it
    signals the end.
    """

    _source: Iterator[FileIdentifier] | FileProducer | None
    _pulled: int

    def __init__(self, source: Iterator[FileIdentifier] | FileProducer) -> None:
        self._source = source
        self._pulled = 0

    @classmethod
    def from_files(cls, files: FileSource | FileSequence) -> FileSequence:
        """Build a sequence from a list, an iterable/generator or a producer callable."""

        if isinstance(files, FileSequence):
            return files
        if isinstance(files, (str, os.PathLike)):
            return cls(iter([files]))
        if isinstance(files, Sequence):
            # Snapshot so later mutation of the caller's list cannot reorder the round.
            return cls(iter(list(files)))
        if isinstance(files, Iterable):
            return cls(iter(files))
        return cls(files)

    @property
    def exhausted(self) -> bool:
        """True once the source has signalled its end."""

        return self._source is None

    @property
    def pulled(self) -> int:
        """Number of identifiers handed out so far."""

        return self._pulled

    def next(self) -> str | None:
        """Return the next identifier, or ``None`` when exhausted."""

        source = self._source
        if source is None:
            return None

        if isinstance(source, Iterator):
            item = next(source, None)
        else:
            item = source()

        if item is None:
            self._source = None
            return None

        self._pulled += 1
        return os.fspath(item)

    def __iter__(self) -> Iterator[str]:
        while (item := self.next()) is not None:
            yield item


__all__ = ["FileSequence", "FileSource", "FileIdentifier", "FileProducer"]
