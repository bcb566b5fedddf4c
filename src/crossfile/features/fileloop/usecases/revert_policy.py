"""Use case deciding whether stale live bindings are reread from disk."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from ..domain.models import FileBinding, RevertDecision, RevertMode
from .ports import RevertConfirm

LOGGER = logging.getLogger(__name__)

DISCARD_EDITS_PROMPT = "File %s changed on disk.  Discard your edits? "
REREAD_PROMPT = "File %s changed on disk.  Reread from disk? "


def revert_prompt(identifier: str, has_unsaved_edits: bool) -> str:
    """Return the confirmation wording for a stale file."""

    template = DISCARD_EDITS_PROMPT if has_unsaved_edits else REREAD_PROMPT
    return template % identifier


def _never_confirm(identifier: str, has_unsaved_edits: bool) -> bool:
    _ = identifier, has_unsaved_edits
    return False


class RevertPolicy:
    """Evaluate and apply the refresh rule for bindings whose disk copy changed."""

    mode: RevertMode
    revertible_patterns: tuple[re.Pattern[str], ...]
    _confirm: RevertConfirm

    def __init__(
        self,
        mode: RevertMode = RevertMode.SILENT,
        *,
        revertible_patterns: Iterable[str | re.Pattern[str]] = (),
        confirm: RevertConfirm | None = None,
    ) -> None:
        self.mode = mode
        self.revertible_patterns = tuple(re.compile(p) for p in revertible_patterns)
        self._confirm = confirm or _never_confirm

    @staticmethod
    def is_stale(binding: FileBinding, disk_mtime: int | None) -> bool:
        """Return True when the disk timestamp differs from the synced one."""

        if disk_mtime is None:
            # A deleted file has nothing to reread.
            return False
        return binding.synced_mtime != disk_mtime

    def is_known_revertible(self, identifier: str) -> bool:
        """Return True when ``identifier`` matches a revert-without-query pattern."""

        return any(pattern.search(identifier) for pattern in self.revertible_patterns)

    def decide(self, binding: FileBinding) -> RevertDecision:
        """Classify a stale binding under the configured mode."""

        if self.mode is RevertMode.NEVER:
            return RevertDecision.LEAVE
        if self.mode is RevertMode.ALWAYS_ASK:
            return RevertDecision.ASK
        if not binding.modified and self.is_known_revertible(binding.identifier):
            return RevertDecision.RELOAD
        return RevertDecision.LEAVE

    def should_reload(self, binding: FileBinding) -> bool:
        """Resolve the decision for ``binding``, asking the caller when required."""

        decision = self.decide(binding)
        if decision is RevertDecision.ASK:
            LOGGER.debug("%s", revert_prompt(binding.identifier, binding.modified).strip())
            return bool(self._confirm(binding.identifier, binding.modified))
        return decision is RevertDecision.RELOAD


__all__ = ["RevertPolicy", "revert_prompt", "DISCARD_EDITS_PROMPT", "REREAD_PROMPT"]
