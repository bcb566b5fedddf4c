"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

import importlib
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def portable_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Provide a temporary repository root for portable path detection."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")
    monkeypatch.delenv("CROSSFILE_CONFIG", raising=False)

    import crossfile.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    return tmp_path


@pytest.fixture
def config_runtime_env(portable_repo_root: Path) -> Iterator[Path]:
    """Reset the configuration singleton (and derived settings) around a test run."""

    from crossfile.config.config import Config

    original_instance = Config._instance  # pyright: ignore[reportPrivateUsage]
    Config._instance = None  # pyright: ignore[reportPrivateUsage]

    try:
        yield portable_repo_root
    finally:
        settings = sys.modules.get("crossfile.config.settings")
        if settings is not None:
            Config._instance = original_instance or Config()  # pyright: ignore[reportPrivateUsage]
            _ = importlib.reload(settings)
        Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
