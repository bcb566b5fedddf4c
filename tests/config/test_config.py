"""Test configuration management."""

from pathlib import Path

import pytest

from crossfile.config.config import Config


def _write(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(body, encoding="utf-8")
    return path


def test_default_config(config_runtime_env: Path) -> None:
    """Defaults apply when no config file exists."""
    _ = config_runtime_env
    config = Config.load()
    assert config.revert_mode == "silent"
    assert config.revertible_patterns == []
    assert config.case_fold_search is True
    assert config.save_after_replace is True
    assert config.encoding == "utf-8"
    assert config.log_file is None


def test_load_toml_from_default_location(config_runtime_env: Path) -> None:
    """Values are read from ``config/crossfile.toml`` under the repository root."""
    _ = _write(
        config_runtime_env / "config" / "crossfile.toml",
        "\n".join(
            [
                'revert_mode = "always-ask"',
                'revertible_patterns = ["\\\\.log$"]',
                "case_fold_search = false",
                "save_after_replace = false",
                'encoding = "latin-1"',
                'log_file = "/tmp/logs/crossfile.log"',
            ]
        ),
    )

    loaded_config = Config.load()

    assert loaded_config == Config(
        revert_mode="always-ask",
        revertible_patterns=[r"\.log$"],
        case_fold_search=False,
        save_after_replace=False,
        encoding="latin-1",
        log_file=Path("/tmp/logs/crossfile.log"),
    )


def test_environment_variable_selects_file(
    config_runtime_env: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = _write(config_runtime_env / "custom.toml", 'revert_mode = "never"\n')
    monkeypatch.setenv("CROSSFILE_CONFIG", str(target))

    assert Config.load().revert_mode == "never"


def test_blank_log_file_becomes_none() -> None:
    assert Config(log_file="  ").log_file is None  # pyright: ignore[reportArgumentType]


def test_singleton_behavior(config_runtime_env: Path) -> None:
    """Implicit loads are cached; explicit paths are not."""
    config1 = Config.load()
    config2 = Config.load()
    assert config1 is config2

    explicit = _write(config_runtime_env / "other.toml", 'revert_mode = "never"\n')
    assert Config.load(explicit) is not config1
    assert Config.load(explicit).revert_mode == "never"
    assert Config.load() is config1


def test_unknown_keys_are_ignored(
    config_runtime_env: Path, caplog: pytest.LogCaptureFixture
) -> None:
    target = _write(config_runtime_env / "odd.toml", 'encoding = "utf-16"\nbase_path = "/music"\n')

    with caplog.at_level("WARNING"):
        config = Config.load(target)

    assert config.encoding == "utf-16"
    assert "base_path" in caplog.text


def test_invalid_toml_raises(config_runtime_env: Path) -> None:
    import tomllib

    target = _write(config_runtime_env / "broken.toml", "revert_mode = \n")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load(target)
