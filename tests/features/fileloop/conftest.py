"""Shared fixtures for fileloop feature tests."""

from __future__ import annotations

import pytest

from crossfile.features.fileloop import Controller, RevertPolicy, Workspace


class MemoryLoader:
    """In-memory content loader with controllable timestamps and failures."""

    def __init__(self, files: dict[str, str]) -> None:
        self.files: dict[str, str] = dict(files)
        self.mtimes: dict[str, int] = {name: 1 for name in files}
        self.loads: list[str] = []
        self.writes: list[str] = []
        self.failing: set[str] = set()

    def load_content(self, identifier: str) -> tuple[str, int | None]:
        self.loads.append(identifier)
        if identifier in self.failing or identifier not in self.files:
            raise FileNotFoundError(identifier)
        return self.files[identifier], self.mtimes[identifier]

    def disk_mtime(self, identifier: str) -> int | None:
        return self.mtimes.get(identifier)

    def write_back_content(self, identifier: str, content: str) -> int | None:
        self.writes.append(identifier)
        self.files[identifier] = content
        self.mtimes[identifier] = self.mtimes.get(identifier, 0) + 1
        return self.mtimes[identifier]

    def change_on_disk(self, identifier: str, content: str) -> None:
        """Simulate another program rewriting ``identifier``."""

        self.files[identifier] = content
        self.mtimes[identifier] += 1


@pytest.fixture
def loader() -> MemoryLoader:
    """Three small files; only ``b.txt`` lacks the word needle."""

    return MemoryLoader(
        {
            "a.txt": "alpha needle\n",
            "b.txt": "nothing here\n",
            "c.txt": "first line\nneedle at start\n",
        }
    )


@pytest.fixture
def workspace(loader: MemoryLoader) -> Workspace:
    return Workspace(loader, RevertPolicy())


@pytest.fixture
def controller(workspace: Workspace) -> Controller:
    return Controller(workspace)


@pytest.fixture
def make_loader() -> type[MemoryLoader]:
    """Expose the in-memory loader class for tests that need custom files."""

    return MemoryLoader
