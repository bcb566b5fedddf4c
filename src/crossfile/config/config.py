"""Configuration management for crossfile."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from crossfile.config.paths import default_config_path

logger = logging.getLogger(__name__)


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # How live files that changed on disk are refreshed: silent, always-ask, never
    revert_mode: str = "silent"

    # Regexes naming files that may be reread without asking (silent mode)
    revertible_patterns: list[str] = field(default_factory=list)

    # Ambient case folding used when a command does not force a mode
    case_fold_search: bool = True

    # Write files back after replacing in them
    save_after_replace: bool = True

    # Text encoding used to read and write files
    encoding: str = "utf-8"

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration, returning defaults when no file exists.

        Without an explicit ``path`` the result is cached for the process.
        """
        if path is None and cls._instance is not None:
            return cls._instance

        config_file = path or default_config_path()
        if config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration from %s: %s", config_file, e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            logger.debug("Configuration loaded from %s", config_file)
        else:
            instance = cls()

        if path is None:
            cls._instance = instance
        return instance


__all__ = ["Config"]
