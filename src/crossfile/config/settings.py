"""Where: src/crossfile/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated defaults to the CLI without repeating file I/O.
Assumptions: - Invalid values fall back to defaults with a warning instead of aborting.
"""

from __future__ import annotations

import logging
import re

from crossfile.config.config import Config
from crossfile.features.fileloop.domain.models import RevertMode

logger = logging.getLogger(__name__)

REVERT_MODE_DEFAULT: RevertMode = RevertMode.SILENT

app_config = Config.load()

# Revert policy -------------------------------------------------------------


def _revert_mode(raw: object) -> RevertMode:
    try:
        return RevertMode.from_user_input(str(raw or REVERT_MODE_DEFAULT.value))
    except ValueError as exc:
        logger.warning("%s; using %s", exc, REVERT_MODE_DEFAULT.value)
        return REVERT_MODE_DEFAULT


REVERT_MODE: RevertMode = _revert_mode(app_config.revert_mode)


def _valid_patterns(raw: object) -> tuple[str, ...]:
    if not isinstance(raw, (list, tuple)):
        return ()
    valid: list[str] = []
    for item in raw:
        try:
            _ = re.compile(str(item))
        except re.error as exc:
            logger.warning("Skipping invalid revertible pattern %r: %s", item, exc)
            continue
        valid.append(str(item))
    return tuple(valid)


REVERTIBLE_PATTERNS: tuple[str, ...] = _valid_patterns(app_config.revertible_patterns)


# Matching and editing ------------------------------------------------------

CASE_FOLD_SEARCH: bool = bool(app_config.case_fold_search)
SAVE_AFTER_REPLACE: bool = bool(app_config.save_after_replace)
FILE_ENCODING: str = app_config.encoding or "utf-8"


__all__ = [
    "REVERT_MODE",
    "REVERTIBLE_PATTERNS",
    "CASE_FOLD_SEARCH",
    "SAVE_AFTER_REPLACE",
    "FILE_ENCODING",
]
